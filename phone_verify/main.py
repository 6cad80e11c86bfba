import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from phone_verify.core.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from phone_verify.core.database import connect_to_mongo, close_mongo_connection
from phone_verify.core.errors import register_exception_handlers
from phone_verify.modules.otp.router import otp_router
from phone_verify.modules.users.router import user_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    app.state.mongodb = await connect_to_mongo()
    yield
    # Shutdown
    await close_mongo_connection(app.state.mongodb)


app = FastAPI(title="Phone Verification Service", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
async def root():
    return {"message": "Phone verification service running"}


app.include_router(otp_router)
app.include_router(user_router)


def run():
    uvicorn.run("phone_verify.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    run()
