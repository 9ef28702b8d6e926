from lockaudit.cli import app

app()
