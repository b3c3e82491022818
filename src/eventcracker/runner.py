import typer

from eventcracker.event import runner as event

app = typer.Typer()
app.add_typer(event.app, name='event')

if __name__ == "__main__":
    app()
