"""Help center API endpoint."""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_app_settings, get_current_user, get_storage, storage_errors
from app.api.resources import parse_body
from app.config import Settings
from app.schemas.help import HelpMessageCreate, HelpMessageResponse
from app.services.mailer import render_help_message, send_email
from app.storage import Record, Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/help", tags=["help"])


@router.post("", response_model=HelpMessageResponse, status_code=status.HTTP_201_CREATED)
async def submit_help_message(
    payload: dict[str, Any] = Body(...),
    current_user: Record = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
):
    """Store a help center message and forward it to the support inbox."""
    message = parse_body(HelpMessageCreate, payload, "help message")

    with storage_errors("sending help message"):
        await storage.help_messages.create({**message.to_record(), "user_id": current_user["id"]})

    html_content, text = render_help_message(message.name, message.email, message.subject, message.message)
    email_sent = await run_in_threadpool(
        send_email,
        settings,
        settings.help_recipient_email,
        settings.help_sender_email,
        f"Help Center: {message.subject}",
        html_content,
        text,
    )
    if not email_sent:
        logger.warning(f"Help message from user {current_user['id']} stored but not emailed")

    return HelpMessageResponse(success=True, message="Message sent successfully", email_sent=email_sent)
