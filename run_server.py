"""Start the Habitrack development server."""

from habitrack import DevConfig, create_app

if __name__ == "__main__":
    app = create_app(DevConfig())
    app.run(debug=True, threaded=True)
