from functools import wraps
from flask import g, request

IMAGE_FIELD = 'image'


def accepts_image(image_store, field_name=IMAGE_FIELD):
    """Decorator that stores an optional uploaded image before the view runs.

    The generated filename (or None when nothing was uploaded) is available
    to the view through ``uploaded_image_name()``.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            g.image_name = None
            file = request.files.get(field_name)
            # browsers send an empty part when no file was picked
            if file and file.filename:
                g.image_name = image_store.save(file)
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def uploaded_image_name():
    return g.get('image_name')
