from quart import Blueprint, jsonify

from ..common.http import parse_body
from .schemas import ItemInput
from .service import change_item, create_item, list_items, remove_item

bp = Blueprint("catalog", __name__, url_prefix="/api")


@bp.get("/productos")
async def items_list():
    items = await list_items()
    return jsonify([item.model_dump(by_alias=True) for item in items])


@bp.post("/productos")
async def items_create():
    item = await parse_body(ItemInput)
    await create_item(item)
    return jsonify({"success": True})


@bp.put("/productos/<int:item_id>")
async def items_update(item_id: int):
    item = await parse_body(ItemInput)
    await change_item(item_id, item)
    return jsonify({"success": True})


@bp.delete("/productos/<int:item_id>")
async def items_delete(item_id: int):
    await remove_item(item_id)
    return jsonify({"success": True})
