from fastapi import Depends
from sqlalchemy.orm import Session
from src.config.database import SessionLocal


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        
def get_service(service_class):
    def _get_service(db: Session = Depends(get_db)):
        return service_class(db)
    return _get_service
