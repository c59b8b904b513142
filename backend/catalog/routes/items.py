import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from catalog.schemas import Item, ItemCreate, describe_decode_error
from catalog.services.cancellation import race_timer, wait_for_disconnect
from catalog.storage import ItemStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/items", tags=["items"])


def get_store(request: Request) -> ItemStore:
    return request.app.state.store


@router.get("", response_model=list[Item])
async def list_items(request: Request, store: ItemStore = Depends(get_store)):
    settings = request.app.state
    elapsed = await race_timer(
        settings.list_latency,
        wait_for_disconnect(request.receive),
        deadline=settings.request_deadline,
    )
    if not elapsed:
        logger.info("Request %s %s was cancelled", request.method, request.url.path)
        return PlainTextResponse("Request cancelled", status_code=408)
    return store.list()


@router.post("", response_model=Item, status_code=201)
async def create_item(request: Request, store: ItemStore = Depends(get_store)):
    raw_body = await request.body()
    try:
        payload = ItemCreate.model_validate_json(raw_body)
    except ValidationError as err:
        return PlainTextResponse(describe_decode_error(err), status_code=400)
    return store.create(payload.model_dump(exclude={"id"}))
