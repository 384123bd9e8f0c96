from menumaster.core.constants import ASSET_FOLDER_PRODUCTS, IMAGE_FILE_FIELD, PRODUCTS_COLLECTION
from menumaster.models.base import Document
from menumaster.utils.validators import as_boolean, as_number, as_string


class Product(Document):
    collection_name = PRODUCTS_COLLECTION
    label = "Product"
    fields = {
        "restaurantId": as_string,
        "name": as_string,
        "description": as_string,
        "price": as_number,
        "categoryId": as_string,
        "available": as_boolean,
    }

    image_fields = ("image", "imagePublicId")
    asset_folder = ASSET_FOLDER_PRODUCTS
    file_field = IMAGE_FILE_FIELD
