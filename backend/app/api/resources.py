"""CRUD endpoints for every per-user entity kind.

All five collections (tasks, budget, vendors, guests, timeline) share one
request flow: authenticate, check ownership of the addressed record,
validate the body, hit storage, then broadcast the change to every
connected client. Only the schemas, labels and event names differ, so the
routers are generated from an :class:`OwnedResource` description.
"""
from dataclasses import dataclass
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from pydantic import BaseModel, ValidationError

from app.api.deps import (
    get_broadcaster,
    get_current_user,
    get_owned_record,
    get_storage,
    storage_errors,
)
from app.schemas.budget import BudgetCategoryCreate, BudgetCategoryResponse, BudgetCategoryUpdate
from app.schemas.common import CamelModel, PartialUpdate, RecordCreate
from app.schemas.guest import GuestCreate, GuestResponse, GuestUpdate
from app.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from app.schemas.vendor import VendorCreate, VendorResponse, VendorUpdate
from app.schemas.wedding import TimelineEventCreate, TimelineEventResponse, TimelineEventUpdate
from app.services.broadcast import ConnectionRegistry
from app.storage import Record, Storage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OwnedResource:
    """Everything that distinguishes one owned-entity router from another."""

    path: str  # URL segment under /api
    label: str  # "budget category" -> "Invalid budget category data"
    plural_label: str  # "budget categories" -> "Error fetching budget categories"
    event_prefix: str  # BUDGET -> BUDGET_CREATED / BUDGET_UPDATED / BUDGET_DELETED
    collection: str  # Storage attribute name
    create_schema: type[RecordCreate]
    update_schema: type[PartialUpdate]
    response_schema: type[CamelModel]

    @property
    def title(self) -> str:
        return self.label[:1].upper() + self.label[1:]


def serialize(schema: type[CamelModel], record: Record) -> dict[str, Any]:
    """Wire representation of a record, as sent in responses and broadcasts."""
    return schema.model_validate(record).model_dump(mode="json", by_alias=True)


def parse_body(schema: type[BaseModel], payload: dict[str, Any], label: str) -> BaseModel:
    """Validate a request body, reporting failures as a 400 scoped to the entity."""
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        logger.debug(f"Rejected {label} payload: {exc.error_count()} error(s)")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label} data",
        )


def build_owned_resource_router(resource: OwnedResource) -> APIRouter:
    """List/create/get/update/delete routes for one owned entity kind."""
    router = APIRouter(prefix=f"/{resource.path}", tags=[resource.path])

    def collection_for(storage: Storage):
        return storage.collection(resource.collection)

    @router.get("", response_model=list[resource.response_schema])
    async def list_records(
        current_user: Record = Depends(get_current_user),
        storage: Storage = Depends(get_storage),
    ):
        with storage_errors(f"fetching {resource.plural_label}"):
            return await collection_for(storage).list(current_user["id"])

    @router.post("", response_model=resource.response_schema, status_code=status.HTTP_201_CREATED)
    async def create_record(
        payload: dict[str, Any] = Body(...),
        current_user: Record = Depends(get_current_user),
        storage: Storage = Depends(get_storage),
        broadcaster: ConnectionRegistry = Depends(get_broadcaster),
    ):
        data = parse_body(resource.create_schema, payload, resource.label).to_record()
        # Ownership always comes from the session, never from the body
        data["user_id"] = current_user["id"]
        with storage_errors(f"creating {resource.label}"):
            record = await collection_for(storage).create(data)

        body = serialize(resource.response_schema, record)
        await broadcaster.broadcast(f"{resource.event_prefix}_CREATED", body)
        return body

    @router.get("/{record_id}", response_model=resource.response_schema)
    async def get_record(
        record_id: int,
        current_user: Record = Depends(get_current_user),
        storage: Storage = Depends(get_storage),
    ):
        return await get_owned_record(collection_for(storage), record_id, current_user, resource.title)

    @router.patch("/{record_id}", response_model=resource.response_schema)
    async def update_record(
        record_id: int,
        payload: dict[str, Any] = Body(...),
        current_user: Record = Depends(get_current_user),
        storage: Storage = Depends(get_storage),
        broadcaster: ConnectionRegistry = Depends(get_broadcaster),
    ):
        collection = collection_for(storage)
        await get_owned_record(collection, record_id, current_user, resource.title)
        changes = parse_body(resource.update_schema, payload, resource.label).changes()

        with storage_errors(f"updating {resource.label}"):
            record = await collection.update(record_id, changes)
        if record is None:
            # Deleted between the ownership check and the update
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{resource.title} not found")

        body = serialize(resource.response_schema, record)
        await broadcaster.broadcast(f"{resource.event_prefix}_UPDATED", body)
        return body

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    async def delete_record(
        record_id: int,
        current_user: Record = Depends(get_current_user),
        storage: Storage = Depends(get_storage),
        broadcaster: ConnectionRegistry = Depends(get_broadcaster),
    ):
        collection = collection_for(storage)
        await get_owned_record(collection, record_id, current_user, resource.title)

        with storage_errors(f"deleting {resource.label}"):
            deleted = await collection.delete(record_id)
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{resource.title} not found")

        await broadcaster.broadcast(f"{resource.event_prefix}_DELETED", {"id": record_id})
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


TASKS = OwnedResource(
    path="tasks",
    label="task",
    plural_label="tasks",
    event_prefix="TASK",
    collection="tasks",
    create_schema=TaskCreate,
    update_schema=TaskUpdate,
    response_schema=TaskResponse,
)

BUDGET = OwnedResource(
    path="budget",
    label="budget category",
    plural_label="budget categories",
    event_prefix="BUDGET",
    collection="budget_categories",
    create_schema=BudgetCategoryCreate,
    update_schema=BudgetCategoryUpdate,
    response_schema=BudgetCategoryResponse,
)

VENDORS = OwnedResource(
    path="vendors",
    label="vendor",
    plural_label="vendors",
    event_prefix="VENDOR",
    collection="vendors",
    create_schema=VendorCreate,
    update_schema=VendorUpdate,
    response_schema=VendorResponse,
)

GUESTS = OwnedResource(
    path="guests",
    label="guest",
    plural_label="guests",
    event_prefix="GUEST",
    collection="guests",
    create_schema=GuestCreate,
    update_schema=GuestUpdate,
    response_schema=GuestResponse,
)

TIMELINE = OwnedResource(
    path="timeline",
    label="timeline event",
    plural_label="timeline events",
    event_prefix="TIMELINE",
    collection="timeline_events",
    create_schema=TimelineEventCreate,
    update_schema=TimelineEventUpdate,
    response_schema=TimelineEventResponse,
)

OWNED_RESOURCES = (TASKS, BUDGET, VENDORS, GUESTS, TIMELINE)

routers = [build_owned_resource_router(resource) for resource in OWNED_RESOURCES]
