import os
import uuid
from fastapi import UploadFile, HTTPException
from artline.config import settings


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if filename and "." in filename else ""


def validate_file(file: UploadFile) -> None:
    ext = file_extension(file.filename)
    if ext not in settings.ALLOWED_MEDIA_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"File type '{ext}' not allowed. Allowed: {', '.join(settings.ALLOWED_MEDIA_EXTENSIONS)}",
        )


async def read_upload(file: UploadFile) -> bytes:
    validate_file(file)
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File exceeds {limit_mb} MB limit")
    return content


def upload_folder(subfolder: str = "") -> str:
    root = os.path.realpath(settings.UPLOAD_DIR)
    folder = os.path.realpath(os.path.join(root, subfolder))
    if os.path.commonpath([root, folder]) != root:
        raise HTTPException(status_code=400, detail="Invalid upload folder")
    return folder


def write_upload(file: UploadFile, content: bytes, subfolder: str = "") -> dict:
    folder = upload_folder(subfolder)
    os.makedirs(folder, exist_ok=True)

    filename = f"{uuid.uuid4().hex}.{file_extension(file.filename)}"
    path = os.path.join(folder, filename)

    with open(path, "wb") as f:
        f.write(content)

    return {
        "filename": filename,
        "original_name": file.filename,
        "mime_type": file.content_type or "application/octet-stream",
        "path": path,
        "url": upload_url(path),
        "size": len(content),
    }


def upload_url(path: str) -> str:
    relative = os.path.relpath(path, os.path.realpath(settings.UPLOAD_DIR)).replace("\\", "/")
    return f"/uploads/{relative}"
