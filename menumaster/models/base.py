from bson.objectid import ObjectId
from pymongo import ReturnDocument

from menumaster.extensions import document_store
from menumaster.utils.validators import normalize_fields


class Document:
    """
    Collection-backed entity.

    Subclasses declare the collection, the label used in not-found/deleted
    messages, the allow-list of writable fields and, for image-bearing
    entities, the (url, public id) field pair and the asset folder.
    """

    collection_name = None
    label = None
    fields = {}
    defaults = {}

    # Image-bearing entities only
    image_fields = None
    asset_folder = None
    file_field = None

    @classmethod
    def has_image(cls):
        return cls.image_fields is not None

    @classmethod
    def collection(cls):
        return document_store.collection(cls.collection_name)

    @classmethod
    def from_request(cls, source):
        """Coerce a request body through the field allow-list; unknown keys are dropped."""
        return normalize_fields(source, cls.fields)

    @classmethod
    def with_defaults(cls, data):
        doc = {k: (v() if callable(v) else v) for k, v in cls.defaults.items()}
        doc.update(data)
        return doc

    @classmethod
    def find_all(cls):
        return list(cls.collection().find())

    @classmethod
    def find_by_id(cls, doc_id):
        return cls.collection().find_one({"_id": ObjectId(doc_id)})

    @classmethod
    def insert(cls, data):
        """Insert a new document and return it including the generated _id"""
        doc = dict(data)
        result = cls.collection().insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    @classmethod
    def update_by_id(cls, doc_id, update_data):
        """Apply $set of update_data and return the updated document, or None"""
        update_data = {k: v for k, v in update_data.items() if k != "_id"}
        if not update_data:
            return cls.find_by_id(doc_id)
        return cls.collection().find_one_and_update(
            {"_id": ObjectId(doc_id)},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER
        )

    @classmethod
    def delete_by_id(cls, doc_id):
        """Delete document and return what was removed, or None"""
        return cls.collection().find_one_and_delete({"_id": ObjectId(doc_id)})
