from flask import Blueprint, current_app, jsonify, Response
from sqlalchemy.exc import SQLAlchemyError
from services.car_store import CarNotFoundError
from utils.helper import InvalidFieldError, parse_car_changes, parse_car_id, parse_new_car, request_data
from utils.upload import accepts_image, uploaded_image_name


def text_response(message, status=200):
    return Response(message, status=status, mimetype='text/plain')


def create_cars_blueprint(car_store, image_store):
    """Build the car endpoints around the given record and image stores."""
    cars_bp = Blueprint("cars", __name__)

    def discard_upload():
        # an image stored for a failed request would be orphaned
        image_name = uploaded_image_name()
        if image_name:
            image_store.discard(image_name)

    def reject(message, status):
        discard_upload()
        return text_response(message, status)

    @cars_bp.route('/all', methods=['GET'])
    def list_cars():
        cars = car_store.list_all()
        return jsonify([car.serialize() for car in cars])

    @cars_bp.route('/read/<car_id>', methods=['GET'])
    def read_car(car_id):
        car_id = parse_car_id(car_id)
        if car_id is None:
            return text_response('Invalid car id.', 400)

        car = car_store.get_by_id(car_id)
        if car is None:
            return text_response('Car not found.', 404)
        return jsonify(car.serialize())

    @cars_bp.route('/create', methods=['POST'])
    @accepts_image(image_store)
    def create_car():
        try:
            fields = parse_new_car(request_data())
        except InvalidFieldError as e:
            return reject(str(e), 400)

        fields['image_name'] = uploaded_image_name()
        try:
            car = car_store.create(fields)
        except SQLAlchemyError:
            discard_upload()
            raise
        current_app.logger.info("Created car %s", car.id)
        return jsonify(car.serialize())

    @cars_bp.route('/update/<car_id>', methods=['PUT'])
    @accepts_image(image_store)
    def update_car(car_id):
        car_id = parse_car_id(car_id)
        if car_id is None:
            return reject('Invalid car id.', 400)

        car = car_store.get_by_id(car_id)
        if car is None:
            return reject('Car not found.', 404)

        try:
            fields = parse_car_changes(request_data())
        except InvalidFieldError as e:
            return reject(str(e), 400)

        new_image = uploaded_image_name()
        old_image = car.image_name
        if new_image:
            fields['image_name'] = new_image

        try:
            car = car_store.update(car_id, fields)
        except CarNotFoundError:
            # removed by another request since the lookup above
            return reject('Car not found.', 404)
        except SQLAlchemyError:
            discard_upload()
            raise

        if new_image and old_image:
            image_store.discard(old_image)
        current_app.logger.info("Updated car %s", car_id)
        return jsonify(car.serialize())

    @cars_bp.route('/delete/<car_id>', methods=['DELETE'])
    def delete_car(car_id):
        car_id = parse_car_id(car_id)
        if car_id is None:
            return text_response('Invalid car id.', 400)

        try:
            car = car_store.delete(car_id)
        except CarNotFoundError:
            return text_response('Car not found.', 404)

        if car.image_name:
            image_store.discard(car.image_name)
        current_app.logger.info("Deleted car %s", car_id)
        return text_response('Car deleted successfully.')

    return cars_bp
