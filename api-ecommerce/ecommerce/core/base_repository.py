# ecommerce/core/base_repository.py
from typing import Generic, TypeVar

from sqlalchemy.orm import Session

TModel = TypeVar("TModel")


class BaseRepository(Generic[TModel]):
    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, model: TModel) -> TModel:
        # add() is a no-op for instances already in the session; flush fires onupdate
        self._session.add(model)
        self._session.flush()
        return model
