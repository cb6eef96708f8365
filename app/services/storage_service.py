"""스토리지 서비스 — S3 또는 로컬 파일 저장.

Storage Service — Uploads files to S3, or to a local directory when
AWS credentials are not configured (local development and tests).
Objects are stored under <folder>/<yyyy/mm/dd>/<uuid>.<ext>.
"""

import uuid
from datetime import datetime, timezone
from pathlib import Path

from starlette.concurrency import run_in_threadpool

from app.config import settings

# 로컬 업로드 디렉토리 — .env의 LOCAL_UPLOADS_DIR 또는 <project>/uploads/
_SERVER_ROOT: Path = Path(__file__).resolve().parent.parent.parent
UPLOADS_DIR: Path = Path(settings.LOCAL_UPLOADS_DIR) if settings.LOCAL_UPLOADS_DIR else _SERVER_ROOT / "uploads"


class StorageService:
    """파일 업로드 서비스 — S3 또는 로컬 모드 자동 선택."""

    def __init__(self) -> None:
        self._client = None

    @property
    def is_local(self) -> bool:
        return not settings.AWS_ACCESS_KEY_ID or not settings.AWS_S3_BUCKET

    @property
    def client(self):
        if self.is_local:
            return None
        if self._client is None:
            import boto3
            from botocore.config import Config as BotoConfig

            self._client = boto3.client(
                "s3",
                region_name=settings.AWS_S3_REGION,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                config=BotoConfig(signature_version="s3v4"),
            )
        return self._client

    @property
    def _base_url(self) -> str:
        if self.is_local:
            return f"{settings.PUBLIC_BASE_URL.rstrip('/')}/uploads/"
        return f"https://{settings.AWS_S3_BUCKET}.s3.{settings.AWS_S3_REGION}.amazonaws.com/"

    def _generate_key(self, filename: str, folder: str) -> str:
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
        date_prefix = datetime.now(timezone.utc).strftime("%Y/%m/%d")
        return f"{folder}/{date_prefix}/{uuid.uuid4().hex}.{ext}"

    def _extract_key(self, file_url: str) -> str | None:
        """file URL에서 storage key를 추출합니다."""
        if file_url.startswith(self._base_url):
            return file_url[len(self._base_url):]
        return None

    def _put(self, key: str, data: bytes, content_type: str) -> None:
        if self.is_local:
            path = UPLOADS_DIR / key
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
            return
        self.client.put_object(
            Bucket=settings.AWS_S3_BUCKET,
            Key=key,
            Body=data,
            ContentType=content_type,
        )

    def _remove(self, key: str) -> None:
        if self.is_local:
            (UPLOADS_DIR / key).unlink(missing_ok=True)
            return
        self.client.delete_object(Bucket=settings.AWS_S3_BUCKET, Key=key)

    async def upload_file(
        self,
        folder: str,
        filename: str,
        content_type: str,
        data: bytes,
    ) -> str:
        """파일을 업로드하고 공개 URL을 반환합니다.

        Upload bytes under the given folder and return the public file URL.
        The blocking boto3/file write runs in the threadpool.

        Args:
            folder: 저장 폴더 (Top-level folder, e.g. "users")
            filename: 원본 파일명 — 확장자만 사용 (Original name, only the extension is kept)
            content_type: MIME 타입 (Content type stored with the object)
            data: 파일 내용 (File bytes)

        Returns:
            str: 업로드된 파일 URL (Public URL of the stored object)
        """
        key = self._generate_key(filename, folder)
        await run_in_threadpool(self._put, key, data, content_type)
        return f"{self._base_url}{key}"

    async def delete_file(self, file_url: str | None) -> bool:
        """업로드했던 파일을 삭제합니다.

        Delete an object previously returned by upload_file.
        URLs not owned by this storage (e.g. Kakao profile images) are ignored.
        """
        if not file_url:
            return False
        key = self._extract_key(file_url)
        if key is None:
            return False
        await run_in_threadpool(self._remove, key)
        return True


storage_service: StorageService = StorageService()
