"""
Keeps an image-bearing document and its asset in the image host in step.

Every image-bearing entity stores a pair of fields: the public URL of its
asset and the asset's public id. The pair is written together and always
names a live asset, except when a best-effort delete failed; those failures
never fail the request and are handed to an AssetFailureReporter instead.

Ordering of side effects is fixed:
  - update with a new file: delete old asset, upload new asset, write document
  - delete: delete asset, delete document

None of these steps are atomic with each other. A crash between them can
leave the document pointing at a deleted asset, or leave an uploaded asset
that no document references. The latter is reported as an orphan when the
document write fails after a successful upload; nothing is compensated.
"""
from datetime import datetime, timezone
from typing import NamedTuple, Optional

from pymongo.errors import PyMongoError

from menumaster.core.constants import ASSET_ROOT_FOLDER


class ImageUpload(NamedTuple):
    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None

    @classmethod
    def from_file_storage(cls, file):
        """Build from a werkzeug FileStorage; None when no file was sent."""
        if file is None or not file.filename:
            return None
        return cls(data=file.read(), filename=file.filename, content_type=file.mimetype)


class AssetFailureReporter:
    """Sink for asset-store problems that must not block document mutation."""

    def delete_failed(self, public_id, error):
        raise NotImplementedError

    def unreferenced(self, public_id, reason):
        raise NotImplementedError


class OrphanedAssetReporter(AssetFailureReporter):
    """
    Logs each failure and records the public id in a collection so an
    external sweep can reconcile the image host later.
    """

    def __init__(self, logger, collection=None):
        self.logger = logger
        self.collection = collection

    def delete_failed(self, public_id, error):
        self.logger.error(
            "AssetDeleteFailed | publicId=%s | error=%s",
            public_id, str(error)
        )
        self._record(public_id, "delete_failed", str(error))

    def unreferenced(self, public_id, reason):
        self.logger.error(
            "AssetUnreferenced | publicId=%s | reason=%s",
            public_id, reason
        )
        self._record(public_id, "unreferenced", reason)

    def _record(self, public_id, kind, detail):
        if self.collection is None:
            return
        try:
            self.collection.insert_one({
                "publicId": public_id,
                "kind": kind,
                "detail": detail,
                "reportedAt": datetime.now(timezone.utc).replace(tzinfo=None),
            })
        except PyMongoError as e:
            self.logger.error(
                "OrphanRecordFailed | publicId=%s | error=%s",
                public_id, str(e)
            )


class ImageSynchronizer:
    def __init__(self, url_field, public_id_field, folder, asset_store, reporter,
                 root_folder=ASSET_ROOT_FOLDER):
        self.url_field = url_field
        self.public_id_field = public_id_field
        self.folder = f"{root_folder}/{folder}" if root_folder else folder
        self.asset_store = asset_store
        self.reporter = reporter

    def attach_on_create(self, raw_fields, upload=None):
        """
        Fields to persist for a new document.

        Without a file both image fields are "" rather than absent. Upload
        errors propagate so that no document gets written.
        """
        fields = dict(raw_fields)
        url, public_id = "", ""
        if upload is not None:
            url, public_id = self._upload(upload)
        fields[self.url_field] = url
        fields[self.public_id_field] = public_id
        return fields

    def replace_on_update(self, existing, raw_fields, upload=None):
        """
        Fields to persist for an update: raw fields merged over the existing
        document. The image pair is carried forward unless a file was sent,
        in which case the old asset is deleted (best effort) before the new
        one is uploaded.
        """
        fields = {k: v for k, v in existing.items() if k != "_id"}
        fields.update(raw_fields)
        url = existing.get(self.url_field, "")
        public_id = existing.get(self.public_id_field, "")

        if upload is not None:
            if public_id:
                self._delete_quietly(public_id)
            url, public_id = self._upload(upload)

        fields[self.url_field] = url
        fields[self.public_id_field] = public_id
        return fields

    def release_on_delete(self, existing):
        public_id = existing.get(self.public_id_field)
        if public_id:
            self._delete_quietly(public_id)

    def report_unreferenced(self, public_id, reason):
        """Surface an uploaded asset whose document write did not happen."""
        if public_id:
            self.reporter.unreferenced(public_id, reason)

    def _upload(self, upload):
        result = self.asset_store.upload(
            upload.data,
            self.folder,
            filename=upload.filename,
            content_type=upload.content_type,
        )
        return result.url, result.public_id

    def _delete_quietly(self, public_id):
        try:
            self.asset_store.delete(public_id)
        except Exception as e:
            self.reporter.delete_failed(public_id, e)
