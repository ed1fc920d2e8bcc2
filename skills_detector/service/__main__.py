from . import run_service

run_service()
