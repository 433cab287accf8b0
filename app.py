import logging
import os
from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from db import db
from extensions.cors import init_cors
from routes.cars import create_cars_blueprint, text_response
from services.car_store import CarStore
from services.image_store import create_image_store

CARS_PREFIX = '/api/cars'


def create_app(config_object="config.Config", overrides=None, car_store=None, image_store=None):
    """Application factory.

    ``car_store`` and ``image_store`` default to the SQLAlchemy-backed store
    and the image folder from config; tests may pass substitutes.
    """
    # the static route is added below, once the folder is known from config
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # serve public/ from the site root so images resolve at /images/<name>
    app.static_folder = app.config["STATIC_FOLDER"]
    app.add_url_rule("/<path:filename>", endpoint="static", view_func=app.send_static_file)

    init_cors(app)

    db.init_app(app)
    with app.app_context():
        db.create_all()

    if car_store is None:
        car_store = CarStore(db.session)
    if image_store is None:
        image_folder = app.config.get("IMAGE_FOLDER") or os.path.join(app.static_folder, "images")
        image_store = create_image_store(image_folder)
    app.extensions["car_store"] = car_store
    app.extensions["image_store"] = image_store

    app.register_blueprint(create_cars_blueprint(car_store, image_store), url_prefix=CARS_PREFIX)

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e):
        db.session.rollback()
        app.logger.exception("Database error: %s", e)
        return text_response('Internal server error.', 500)

    return app


if __name__ == "__main__":
    app = create_app()
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    port = app.config["PORT"]
    app.logger.info("Car API app listening on port %s", port)
    app.run(host="0.0.0.0", port=port, debug=False)
