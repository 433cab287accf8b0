"""Persistence for car records.

The store wraps a SQLAlchemy session (normally ``db.session``) so the router
can be built against a substitute in tests.
"""
from sqlalchemy import func, select

from db import Car

UPDATABLE_FIELDS = ('name', 'brand', 'model', 'year', 'price', 'description', 'image_name')


class CarNotFoundError(Exception):
    """Raised when no car exists for the requested id."""

    def __init__(self, car_id):
        super().__init__(f"Car {car_id} not found")
        self.car_id = car_id


class CarStore:
    def __init__(self, session):
        self.session = session

    def list_all(self):
        return self.session.scalars(select(Car).order_by(Car.id)).all()

    def get_by_id(self, car_id):
        return self.session.get(Car, car_id)

    def create(self, fields):
        """Persist a new car from validated fields and return it with its id."""
        car = Car(**fields)
        self.session.add(car)
        self.session.commit()
        return car

    def update(self, car_id, fields):
        """Overwrite only the keys present in ``fields``."""
        car = self._get_or_raise(car_id)
        for field in UPDATABLE_FIELDS:
            if field in fields:
                setattr(car, field, fields[field])
        self.session.commit()
        return car

    def delete(self, car_id):
        car = self._get_or_raise(car_id)
        self.session.delete(car)
        self.session.commit()
        return car

    def count(self):
        return self.session.scalar(select(func.count()).select_from(Car))

    def _get_or_raise(self, car_id):
        car = self.get_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return car
