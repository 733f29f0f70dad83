"""
Custom handlers example.

Demonstrates:
- Subclassing Handler for domain logic
- Registering plain async callables with CallbackHandler
- Custom Jinja2 templates per view
"""

from fastapi import FastAPI

from front_controller import (
    CallbackHandler,
    DefaultHandler,
    FrontController,
    Handler,
    HandlerFailure,
    HandlerRegistry,
    Request,
    Router,
    TemplateRenderer,
    ViewResult,
    mount_front_controller,
)

ORDERS = {
    "1": {"id": "1", "item": "Keyboard", "status": "shipped"},
    "2": {"id": "2", "item": "Monitor", "status": "pending"},
}


class OrderHandler(Handler):
    """Shows one order, selected by the ``id`` parameter."""

    async def process(self, request: Request) -> ViewResult:
        order_id = request.params.get("id", "")
        order = ORDERS.get(order_id)
        if order is None:
            raise HandlerFailure(f"Unknown order {order_id!r}")
        return ViewResult("orderView", {"order": order})


async def list_orders(request: Request) -> ViewResult:
    return ViewResult("ordersView", {"orders": list(ORDERS.values())})


templates = {
    "orderView": "<h1>Order {{ order.id }}</h1><p>{{ order.item }}: {{ order.status }}</p>",
    "ordersView": (
        "<ul>{% for order in orders %}<li>{{ order.id }} {{ order.item }}</li>"
        "{% endfor %}</ul>"
    ),
    "defaultView": "<h1>Not here</h1><p>{{ path }}</p>",
}

registry = HandlerRegistry(
    {
        "/orders": CallbackHandler(list_orders),
        "/order": OrderHandler(),
    },
    default=DefaultHandler(),
)

controller = FrontController(Router(registry, TemplateRenderer(templates)))

app = FastAPI(title="Custom Handlers Example")
mount_front_controller(app, controller)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl http://localhost:8000/orders
    # curl "http://localhost:8000/order?id=1"
    # curl "http://localhost:8000/order?id=9"   -> 500 Unknown order '9'
