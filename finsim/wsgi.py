#setup: pip install -e ".[test]"
#setup: flask --app finsim.wsgi run --port 5000 --debug

from finsim.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=5000, debug=app.config["DEBUG"])
