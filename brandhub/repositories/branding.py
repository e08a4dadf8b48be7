from sqlalchemy.orm import Session

from brandhub.models.branding import Branding


def create_branding(db: Session, *, name: str | None, category: str | None, image: str) -> Branding:
    branding = Branding(name=name, category=category, image=image)
    db.add(branding)
    db.commit()
    db.refresh(branding)
    return branding


def list_brandings(db: Session) -> list[Branding]:
    return db.query(Branding).order_by(Branding.id).all()


def get_branding(db: Session, branding_id: int) -> Branding | None:
    return db.get(Branding, branding_id)


def update_branding(
    db: Session,
    branding: Branding,
    *,
    name: str | None = None,
    category: str | None = None,
    image: str | None = None,
) -> Branding:
    """Apply a partial update, keeping stored values for empty fields.

    Unlike ``update_user`` this merges: ``None`` and ``""`` both fall back
    to what is already stored, so a request carrying only ``name`` leaves
    ``category`` and ``image`` untouched.
    """
    branding.name = name or branding.name
    branding.category = category or branding.category
    branding.image = image or branding.image
    db.commit()
    db.refresh(branding)
    return branding


def delete_branding(db: Session, branding: Branding) -> None:
    # The image file stays on disk.
    db.delete(branding)
    db.commit()
