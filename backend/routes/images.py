# backend/routes/images.py
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import Response
from sqlalchemy.orm import Session

from database import get_db
from utils.audit import client_ip, write_log
from schemas.response import ApiResponse
from services import image_service

router = APIRouter(prefix="/images", tags=["Images"])


# Multipart upload: several files for one product
@router.post("/upload", response_model=ApiResponse)
def upload_images(
    request: Request,
    files: List[UploadFile] = File(...),
    product_id: int = Form(..., alias="productId"),
    db: Session = Depends(get_db),
):
    try:
        images = image_service.save_images(db, product_id, files)
    finally:
        for f in files:
            f.file.close()

    write_log(
        db, action="IMAGE_UPLOAD", resource="images", ip=client_ip(request),
        meta={"product_id": product_id, "ids": [img.id for img in images]},
    )
    return ApiResponse(message="Images uploaded successfully!", data=images)


def content_disposition(file_name: str) -> str:
    # Header values go out as latin-1: non-ASCII names travel in filename* (RFC 6266)
    quoted = quote(file_name)
    if quoted == file_name:
        return f'attachment; filename="{file_name}"'
    fallback = file_name.encode("ascii", "ignore").decode().replace('"', "").replace("\\", "")
    return f"attachment; filename=\"{fallback or 'download'}\"; filename*=utf-8''{quoted}"


# Raw bytes with the stored MIME type, served as an attachment
@router.get("/image/download/{image_id}")
def download_image(image_id: int, db: Session = Depends(get_db)):
    image = image_service.get_image_by_id(db, image_id, with_payload=True)
    return Response(
        content=image.image,
        media_type=image.file_type,
        headers={"Content-Disposition": content_disposition(image.file_name)},
    )


@router.put("/image/{image_id}/update", response_model=ApiResponse)
def update_image(
    image_id: int,
    request: Request,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
):
    try:
        image_service.update_image(db, file, image_id)
    finally:
        file.file.close()

    write_log(db, action="IMAGE_UPDATE", resource="images", ip=client_ip(request), meta={"id": image_id})
    return ApiResponse(message="Image updated successfully!", data=None)


@router.delete("/image/{image_id}/delete", response_model=ApiResponse)
def delete_image(image_id: int, request: Request, db: Session = Depends(get_db)):
    image_service.delete_image_by_id(db, image_id)
    write_log(db, action="IMAGE_DELETE", resource="images", ip=client_ip(request), meta={"id": image_id})
    return ApiResponse(message="Image successfully deleted!", data=None)
