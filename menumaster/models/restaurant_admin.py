from menumaster.core.constants import RESTAURANT_ADMINS_COLLECTION
from menumaster.models.base import Document
from menumaster.utils.validators import as_datetime, as_string


class RestaurantAdmin(Document):
    collection_name = RESTAURANT_ADMINS_COLLECTION
    label = "Admin"
    # password is persisted exactly as submitted
    fields = {
        "restaurantId": as_string,
        "createdAt": as_datetime,
        "username": as_string,
        "password": as_string,
        "restaurantName": as_string,
    }
