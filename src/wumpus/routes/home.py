"""Home, help, about and map routes."""

from xitzin import Request, Xitzin

from ..engine.cave import CAVE_LAYOUT


def register_routes(app: Xitzin) -> None:
    """Register pages that need no client certificate."""

    @app.gemini("/", name="home")
    def home(request: Request):
        return app.template("home.gmi")

    @app.gemini("/help", name="help")
    def help_page(request: Request):
        return app.template("help.gmi")

    @app.gemini("/about", name="about")
    def about(request: Request):
        return app.template("about.gmi")

    @app.gemini("/map", name="map")
    def cave_map(request: Request):
        """List every chamber and its tunnels, numbered from 1."""
        chambers = [
            {
                "number": chamber.id + 1,
                "tunnels": [neighbour + 1 for neighbour in chamber.connections],
            }
            for chamber in CAVE_LAYOUT
        ]
        return app.template("map.gmi", chambers=chambers)
