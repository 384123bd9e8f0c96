from menumaster.core.constants import OFFERS_COLLECTION
from menumaster.models.base import Document
from menumaster.utils.validators import as_boolean, as_datetime, as_number, as_string, as_string_list


class Offer(Document):
    collection_name = OFFERS_COLLECTION
    label = "Offer"
    fields = {
        "restaurantId": as_string,
        "title": as_string,
        "description": as_string,
        "discount": as_number,
        "tags": as_string_list,
        "validUntil": as_datetime,
        "active": as_boolean,
    }
    # Array fields always exist, even when omitted on create
    defaults = {"tags": list}
