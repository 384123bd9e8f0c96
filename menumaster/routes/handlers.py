"""Shared request handling for the entity blueprints."""
from flask import current_app, jsonify, request
from pymongo.errors import PyMongoError

from menumaster.core.constants import ORPHANED_ASSETS_COLLECTION
from menumaster.core.exceptions import FieldValidationError, NotFoundError
from menumaster.extensions import document_store, get_asset_store
from menumaster.services.image_sync import ImageSynchronizer, ImageUpload, OrphanedAssetReporter
from menumaster.utils.serializers import serialize_doc


def read_body():
    """JSON body, or the submitted form for urlencoded/multipart requests"""
    if request.is_json:
        body = request.get_json()
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise FieldValidationError(None, "Request body must be a JSON object")
        return body
    return request.form


def read_upload(model):
    if not model.has_image():
        return None
    return ImageUpload.from_file_storage(request.files.get(model.file_field))


def image_sync_for(model):
    url_field, public_id_field = model.image_fields
    reporter = OrphanedAssetReporter(
        current_app.logger,
        document_store.collection(ORPHANED_ASSETS_COLLECTION)
    )
    return ImageSynchronizer(
        url_field,
        public_id_field,
        model.asset_folder,
        get_asset_store(),
        reporter,
        root_folder=current_app.config.get("ASSET_ROOT_FOLDER"),
    )


def get_or_404(model, doc_id):
    doc = model.find_by_id(doc_id)
    if not doc:
        current_app.logger.warning(
            "%sNotFound | id=%s", model.__name__, doc_id
        )
        raise NotFoundError(f"{model.label} not found")
    return doc


def create_document(model):
    fields = model.with_defaults(model.from_request(read_body()))
    sync = None
    if model.has_image():
        sync = image_sync_for(model)
        fields = sync.attach_on_create(fields, read_upload(model))

    try:
        doc = model.insert(fields)
    except PyMongoError:
        if sync is not None:
            sync.report_unreferenced(fields.get(sync.public_id_field), "insert failed after upload")
        raise

    current_app.logger.info(
        "%sCreated | id=%s", model.__name__, doc["_id"]
    )
    return jsonify(serialize_doc(doc)), 201


def list_documents(model):
    docs = model.find_all()
    current_app.logger.info(
        "%sListed | count=%s", model.__name__, len(docs)
    )
    return jsonify(serialize_doc(docs)), 200


def get_document(model, doc_id):
    doc = get_or_404(model, doc_id)
    return jsonify(serialize_doc(doc)), 200


def update_document(model, doc_id):
    existing = get_or_404(model, doc_id)
    fields = model.from_request(read_body())

    sync = None
    upload = None
    if model.has_image():
        sync = image_sync_for(model)
        upload = read_upload(model)
        fields = sync.replace_on_update(existing, fields, upload)

    try:
        updated = model.update_by_id(doc_id, fields)
    except PyMongoError:
        if upload is not None:
            sync.report_unreferenced(fields.get(sync.public_id_field), "update failed after upload")
        raise

    if updated is None:
        # Removed by a concurrent delete between the lookup and the write
        if upload is not None:
            sync.report_unreferenced(fields.get(sync.public_id_field), "document deleted during update")
        raise NotFoundError(f"{model.label} not found")

    current_app.logger.info(
        "%sUpdated | id=%s | imageReplaced=%s", model.__name__, doc_id, upload is not None
    )
    return jsonify(serialize_doc(updated)), 200


def delete_document(model, doc_id):
    existing = get_or_404(model, doc_id)
    if model.has_image():
        image_sync_for(model).release_on_delete(existing)

    if model.delete_by_id(doc_id) is None:
        raise NotFoundError(f"{model.label} not found")

    current_app.logger.info(
        "%sDeleted | id=%s", model.__name__, doc_id
    )
    return jsonify({"message": f"{model.label} deleted"}), 200
