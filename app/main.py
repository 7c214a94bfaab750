from dotenv import load_dotenv
from server import server

server_app = server.handler

load_dotenv()
