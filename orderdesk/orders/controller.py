from quart import Blueprint, jsonify

from ..common.http import parse_body
from .schemas import NewOrder, StatusChange
from .service import create_order, list_orders, set_status

bp = Blueprint("orders", __name__, url_prefix="/api")


@bp.post("/pedido")
async def order_create():
    new_order = await parse_body(NewOrder)
    order_id = await create_order(new_order)
    return jsonify({"pedidoId": order_id})


@bp.get("/pedidos")
async def orders_list():
    orders = await list_orders()
    return jsonify([order.model_dump(by_alias=True) for order in orders])


@bp.put("/pedido/<int:order_id>")
async def order_status_update(order_id: int):
    change = await parse_body(StatusChange)
    await set_status(order_id, change)
    return jsonify({"success": True})
