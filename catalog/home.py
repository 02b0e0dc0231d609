from fastapi.responses import HTMLResponse

from .serving import serve
from .web import build_app

HOME_PAGE = """
<html>
  <head>
    <title>Express Group</title>
    <style>
      body {
        font-family: Arial, sans-serif;
        margin: 40px;
        line-height: 1.6;
      }
      h1 {
        color: #333;
      }
      ul {
        list-style-type: circle;
      }
      li {
        margin-bottom: 10px;
      }
    </style>
  </head>
  <body>
    <h1>Our Group Members</h1>
    <ul>
      <li>Amanpreet Singh</li>
      <li>ramanjot kaur</li>
      <li>Khushpreet kaur</li>
    </ul>
  </body>
</html>
"""

app = build_app("catalog-servers (home)")

@app.get("/", response_class=HTMLResponse)
def index():
    return HOME_PAGE

def main():
    serve(app, "Home server")

if __name__ == "__main__":
    main()
