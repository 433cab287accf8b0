from flask_cors import CORS

# restrict API access to requests from the configured origins
def init_cors(app):
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})
