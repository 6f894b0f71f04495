import logging

import uvicorn
from mealcart.api.api_run import app
from mealcart.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


def run():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    local_url = f"http://localhost:{APP_PORT}"
    # Print a friendly message that points to the URL the API docs live at
    print(f"MealCart API running on {local_url} (docs at {local_url}/docs, CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
