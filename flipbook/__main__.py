from flipbook.cli import app

app()
