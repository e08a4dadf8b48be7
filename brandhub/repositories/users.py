from sqlalchemy.orm import Session

from brandhub.models.user import User


def create_user(
    db: Session,
    *,
    name: str | None,
    email: str | None,
    password: str | None = None,
    address: str | None = None,
) -> User:
    user = User(name=name, email=email, password=password, address=address)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def update_user(
    db: Session,
    user: User,
    *,
    name: str | None,
    email: str | None,
    address: str | None,
) -> User:
    # Overwrite: anything the caller left out is cleared.
    user.name = name
    user.email = email
    user.address = address
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user: User) -> None:
    db.delete(user)
    db.commit()
