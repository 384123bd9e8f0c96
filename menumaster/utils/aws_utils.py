import uuid
from typing import NamedTuple, Optional

from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError
from werkzeug.utils import secure_filename

from menumaster.core.constants import ALLOWED_IMAGE_EXTENSIONS
from menumaster.core.exceptions import AssetUploadError


class UploadResult(NamedTuple):
    url: str
    public_id: str


def allowed_file(filename):
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_IMAGE_EXTENSIONS


def file_extension(filename: Optional[str]) -> str:
    """Lower-cased extension of a client filename, or "" when it has none."""
    if not filename:
        return ""
    filename = secure_filename(filename)
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


class S3AssetStore:
    """
    Image host backed by a single S3 bucket.

    The public id of an asset is its object key, so it can be deleted or
    checked later without keeping any other state.
    """

    def __init__(self, s3_client, bucket_name, region):
        self.s3_client = s3_client
        self.bucket_name = bucket_name
        self.region = region

    def build_url(self, key: str) -> str:
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"

    def build_key(self, folder: str, filename: Optional[str] = None) -> str:
        ext = file_extension(filename)
        name = uuid.uuid4().hex
        if ext:
            name = f"{name}.{ext}"
        return f"{folder.rstrip('/')}/{name}"

    def upload(self, data: bytes, folder: str, filename: Optional[str] = None,
               content_type: Optional[str] = None) -> UploadResult:
        """
        Upload raw image bytes under `folder`.

        Returns:
            UploadResult with the public URL and the object key (public id).
        Raises:
            AssetUploadError if the file type is not allowed, the bucket is not
            configured or S3 rejects the upload.
        """
        if self.s3_client is None or not self.bucket_name:
            raise AssetUploadError("Asset store is not configured")
        if file_extension(filename) and not allowed_file(secure_filename(filename)):
            raise AssetUploadError(f"Unsupported file type: {filename}")

        key = self.build_key(folder, filename)
        extra_args = {"ContentType": content_type} if content_type else {}
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=data,
                **extra_args
            )
        except (NoCredentialsError, ClientError, BotoCoreError) as e:
            raise AssetUploadError(str(e)) from e

        return UploadResult(url=self.build_url(key), public_id=key)

    def delete(self, public_id: str) -> None:
        # Errors propagate; callers decide whether a failed delete matters.
        self.s3_client.delete_object(Bucket=self.bucket_name, Key=public_id)

    def exists(self, public_id: str) -> bool:
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=public_id)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code in ("404", "NoSuchKey", "NotFound"):
                return False
            raise
        return True
