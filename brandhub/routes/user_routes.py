from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from brandhub.auth.dependencies import require_session
from brandhub.auth.jwt_handler import SessionClaims
from brandhub.database import get_db
from brandhub.repositories import users as user_repository

router = APIRouter(tags=['users'])


class UserFieldsRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    address: str | None = None


def get_user_or_404(user_id: int, db: Session):
    user = user_repository.get_user(db, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f'User {user_id} not found')
    return user


@router.post('')
def create_user(data: UserFieldsRequest, db: Session = Depends(get_db)):
    user = user_repository.create_user(db, name=data.name, email=data.email, address=data.address)
    return {'data': user.to_public_dict(), 'message': 'User created'}


@router.get('')
def list_users(
    session: SessionClaims = Depends(require_session),
    db: Session = Depends(get_db),
):
    users = user_repository.list_users(db)
    return {'data': [user.to_public_dict() for user in users], 'message': 'User lists'}


@router.patch('/{user_id}')
def update_user(user_id: int, data: UserFieldsRequest, db: Session = Depends(get_db)):
    user = get_user_or_404(user_id, db)
    user = user_repository.update_user(db, user, name=data.name, email=data.email, address=data.address)
    return {'data': user.to_public_dict(), 'message': f'User {user_id} updated'}


@router.delete('/{user_id}')
def delete_user(user_id: int, db: Session = Depends(get_db)):
    user = get_user_or_404(user_id, db)
    user_repository.delete_user(db, user)
    return {'message': f'User {user_id} deleted'}
