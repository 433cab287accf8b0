from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class Car(db.Model):
    __tablename__ = "car"
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String, nullable=False)
    brand = db.Column(db.String, nullable=False)
    model = db.Column(db.String, nullable=False)
    year = db.Column(db.Integer, nullable=False)
    price = db.Column(db.Float, nullable=False)
    description = db.Column(db.String, nullable=False, default="")
    image_name = db.Column("imageName", db.String, nullable=True)  # file name inside the image folder

    def __init__(self, **kwargs):
        self.name = kwargs.get("name")
        self.brand = kwargs.get("brand")
        self.model = kwargs.get("model")
        self.year = kwargs.get("year")
        self.price = kwargs.get("price")
        self.description = kwargs.get("description") or ""
        self.image_name = kwargs.get("image_name")

    def serialize(self):
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "model": self.model,
            "year": self.year,
            "price": self.price,
            "description": self.description,
            "imageName": self.image_name
        }
