"""
External store collaborators for consultation requests.

The form only needs two things from a store: whether it is usably
configured, and "insert these rows into this table". Transport failures
are raised, store-side failures are returned as a StoreError on the
response.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from sqlalchemy.exc import SQLAlchemyError

from db import db
from models import ConsultationRequest

logger = logging.getLogger(__name__)


@dataclass
class StoreError:
    message: Optional[str] = None
    code: Optional[str] = None
    status: Optional[int] = None


@dataclass
class StoreResponse:
    error: Optional[StoreError] = None


class ConsultationStore:
    """Base contract every store implements."""

    def is_configured(self) -> bool:
        raise NotImplementedError

    def insert(self, table: str, rows: List[Dict[str, Any]]) -> StoreResponse:
        raise NotImplementedError


class SupabaseStore(ConsultationStore):
    """Hosted Supabase backend, reached through its PostgREST endpoint."""

    def __init__(self, url, key, timeout=None, session=None):
        self.url = (url or "").rstrip("/")
        self.key = key or ""
        self.timeout = timeout
        self.session = session or requests.Session()

    def is_configured(self):
        return bool(self.url and self.key)

    @property
    def headers(self):
        return {
            "apikey": self.key,
            "Authorization": f"Bearer {self.key}",
            "Content-Type": "application/json",
        }

    def _table_url(self, table):
        return f"{self.url}/rest/v1/{table}"

    def insert(self, table, rows):
        response = self.session.post(
            self._table_url(table),
            json=rows,
            headers={**self.headers, "Prefer": "return=minimal"},
            timeout=self.timeout,
        )
        if not response.ok:
            return StoreResponse(error=_error_from(response))
        return StoreResponse()


def _error_from(response):
    """Build a StoreError from a PostgREST error body, if it has one."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {}
    logger.warning(f"Supabase request failed: status={response.status_code}, code={body.get('code')}")
    return StoreError(
        message=body.get("message") or None,
        code=body.get("code"),
        status=response.status_code,
    )


class SqlAlchemyStore(ConsultationStore):
    """Relational store through Flask-SQLAlchemy, for local or self-hosted databases."""

    models = {ConsultationRequest.__tablename__: ConsultationRequest}

    def is_configured(self):
        return True

    def _model_for(self, table):
        return self.models.get(table)

    def insert(self, table, rows):
        model = self._model_for(table)
        if model is None:
            return StoreResponse(error=StoreError(message=f'relation "{table}" does not exist'))

        try:
            db.session.add_all([model(**row) for row in rows])
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.warning(f"Insert into {table} failed: {e}")
            return StoreResponse(error=StoreError(message=str(getattr(e, "orig", None) or e)))
        return StoreResponse()


def build_store(app):
    """Pick the store for this app: a SQL database if one is configured, else Supabase."""
    if app.config.get("SQLALCHEMY_DATABASE_URI"):
        db.init_app(app)
        return SqlAlchemyStore()

    return SupabaseStore(
        app.config.get("SUPABASE_URL"),
        app.config.get("SUPABASE_ANON_KEY"),
        timeout=app.config.get("SUPABASE_TIMEOUT"),
    )
