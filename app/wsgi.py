from app.grimoire import create_app

app = create_app()
