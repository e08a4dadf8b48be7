import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from brandhub.core.errors import SERVER_ERROR_MESSAGE
from brandhub.database import get_db
from brandhub.repositories import branding as branding_repository
from brandhub.storage.uploads import save_upload

router = APIRouter(tags=['branding'])

logger = logging.getLogger(__name__)

LIST_MESSAGE = 'List Data Branding'
NOT_FOUND_MESSAGE = 'Branding not found'


def server_error(db: Session, action: str) -> HTTPException:
    db.rollback()
    logger.exception('Error %s branding', action)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR_MESSAGE)


def has_file(upload: UploadFile | None) -> bool:
    return upload is not None and bool(upload.filename)


@router.post('')
def create_branding(
    name: str | None = Form(default=None),
    category: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    db: Session = Depends(get_db),
):
    if not has_file(image):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='No file uploaded')

    try:
        image_path = save_upload(image)
        branding = branding_repository.create_branding(db, name=name, category=category, image=image_path)
    except (SQLAlchemyError, OSError) as exc:
        raise server_error(db, 'creating') from exc

    return {'data': branding.to_dict(), 'message': 'Image uploaded and branding created'}


@router.get('')
def list_brandings(db: Session = Depends(get_db)):
    brandings = branding_repository.list_brandings(db)
    return {'data': [branding.to_dict() for branding in brandings], 'message': LIST_MESSAGE}


@router.get('/{branding_id}')
def get_branding_detail(branding_id: int, db: Session = Depends(get_db)):
    try:
        branding = branding_repository.get_branding(db, branding_id)
    except SQLAlchemyError as exc:
        raise server_error(db, 'fetching') from exc

    if branding is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)

    return {'data': [branding.to_dict()], 'message': LIST_MESSAGE}


@router.put('/{branding_id}')
def update_branding(
    branding_id: int,
    name: str | None = Form(default=None),
    category: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    db: Session = Depends(get_db),
):
    try:
        branding = branding_repository.get_branding(db, branding_id)
        if branding is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)

        image_path = save_upload(image) if has_file(image) else None
        branding = branding_repository.update_branding(
            db,
            branding,
            name=name,
            category=category,
            image=image_path,
        )
    except (SQLAlchemyError, OSError) as exc:
        raise server_error(db, 'editing') from exc

    return {'data': branding.to_dict(), 'message': 'Branding updated'}


@router.delete('/{branding_id}')
def delete_branding(branding_id: int, db: Session = Depends(get_db)):
    branding = branding_repository.get_branding(db, branding_id)
    if branding is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)

    branding_repository.delete_branding(db, branding)
    return {'message': f'Branding {branding_id} deleted'}
