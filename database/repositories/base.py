from sqlalchemy.orm import Session


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(self, record) -> None:
        self.db.add(record)
        self.db.flush()

    def remove(self, record) -> None:
        self.db.delete(record)
        self.db.flush()
