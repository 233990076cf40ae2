"""Static HTML shell served for every non-POST request.

The page only hosts the client bundle; rendering happens in the bundle.
"""

from html import escape

SHELL_CSS = """
body {
  margin: 0;
  font-family: 'Arial', sans-serif;
  background-color: #1a1a2e;
  color: #e0e0e0;
}
#root {
  max-width: 600px;
  margin: 0 auto;
  height: 100vh;
}
"""


def render_shell(bundle_url: str, title: str = "Advanced AI") -> str:
    """Return the HTML document that loads the client bundle."""
    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{escape(title)}</title>
    <style>{SHELL_CSS}</style>
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="{escape(bundle_url, quote=True)}"></script>
  </body>
</html>
"""
