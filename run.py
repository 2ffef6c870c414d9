from app import app
from server_config import HOST, PORT, DEBUG

if __name__ == '__main__':
    print(f"Stylesheet demo running at http://{HOST}:{PORT}")
    app.run(debug=DEBUG, host=HOST, port=PORT)
