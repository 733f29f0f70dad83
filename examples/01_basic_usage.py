"""
Basic usage example of front-controller.

Demonstrates:
- The built-in /user route and default fallback
- Mounting the controller as the app's single entry point
"""

import logging

from front_controller import create_app

logging.basicConfig(level=logging.DEBUG)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl "http://localhost:8000/user?id=7"    -> user view
    # curl http://localhost:8000/USER           -> user view (case-insensitive)
    # curl http://localhost:8000/anything/else  -> default view
