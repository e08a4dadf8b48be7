import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from brandhub.auth import jwt_handler
from brandhub.auth.passwords import hash_password, verify_password
from brandhub.database import get_db
from brandhub.repositories import users as user_repository

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)


class RegisterRequest(BaseModel):
    name: str | None = None
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


@router.post('/register')
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    # A duplicate email fails in the store and is left to the global handler.
    user_repository.create_user(
        db,
        name=data.name,
        email=data.email,
        password=hash_password(data.password),
    )
    logger.info('Registered user %s', data.email)
    return {'message': 'user created'}


@router.post('/login')
def login(data: LoginRequest, db: Session = Depends(get_db)):
    user = user_repository.get_user_by_email(db, data.email)

    if user is None:
        logger.warning('Login failed for %s: unknown email', data.email)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found')

    if not user.password:
        logger.warning('Login failed for %s: no password set', data.email)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Password not found')

    if not verify_password(data.password, user.password):
        logger.warning('Login failed for %s: wrong password', data.email)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Wrong password')

    claims = jwt_handler.SessionClaims(id=user.id, name=user.name, address=user.address)
    token = jwt_handler.create_access_token(claims)
    logger.info('User %s logged in', user.id)

    return {'data': user.to_public_dict(), 'token': token}
