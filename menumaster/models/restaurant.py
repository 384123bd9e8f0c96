from menumaster.core.constants import ASSET_FOLDER_RESTAURANTS, LOGO_FILE_FIELD, RESTAURANTS_COLLECTION
from menumaster.models.base import Document
from menumaster.utils.validators import as_string


class Restaurant(Document):
    collection_name = RESTAURANTS_COLLECTION
    label = "Restaurant"
    fields = {
        "adminId": as_string,
        "name": as_string,
        "address": as_string,
        "contact": as_string,
    }

    image_fields = ("logo", "logoPublicId")
    asset_folder = ASSET_FOLDER_RESTAURANTS
    file_field = LOGO_FILE_FIELD
