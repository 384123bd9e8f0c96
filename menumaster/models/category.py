from menumaster.core.constants import ASSET_FOLDER_CATEGORIES, CATEGORIES_COLLECTION, IMAGE_FILE_FIELD
from menumaster.models.base import Document
from menumaster.utils.validators import as_number, as_string


class Category(Document):
    collection_name = CATEGORIES_COLLECTION
    label = "Category"
    fields = {
        "restaurantId": as_string,
        "order": as_number,
        "name": as_string,
    }

    image_fields = ("image", "imagePublicId")
    asset_folder = ASSET_FOLDER_CATEGORIES
    file_field = IMAGE_FILE_FIELD
