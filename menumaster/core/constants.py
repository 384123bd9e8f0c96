# ------------------------
# MongoDB Collection Names
# ------------------------
CATEGORIES_COLLECTION = "categories"
OFFERS_COLLECTION = "offers"
PRODUCTS_COLLECTION = "products"
RESTAURANT_ADMINS_COLLECTION = "restaurantadmins"
RESTAURANTS_COLLECTION = "restaurants"
ORPHANED_ASSETS_COLLECTION = "orphanedAssets"

# ------------------------
# Asset Store (S3) Configuration
# ------------------------
ASSET_ROOT_FOLDER = "menumaster"

# Subfolders
ASSET_FOLDER_CATEGORIES = "categories"
ASSET_FOLDER_PRODUCTS = "products"
ASSET_FOLDER_RESTAURANTS = "restaurants"

# Multipart field names carrying the uploaded file
IMAGE_FILE_FIELD = "image"
LOGO_FILE_FIELD = "logo"

ALLOWED_IMAGE_EXTENSIONS = ["png", "jpg", "jpeg", "gif", "webp", "svg", "avif"]

# ------------------------
# MongoDB client timeouts (milliseconds)
# ------------------------
MONGO_SERVER_SELECTION_TIMEOUT_MS = 30000
MONGO_CONNECT_TIMEOUT_MS = 30000
MONGO_SOCKET_TIMEOUT_MS = 45000

# Values reported by the health endpoint
CONNECTION_STATES = ("connected", "connecting", "disconnecting", "disconnected")
