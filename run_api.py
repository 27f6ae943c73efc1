"""Run the screening HTTP API from project root. Use: python run_api.py"""
import uvicorn

from resume_screener.config import API_HOST, API_PORT

if __name__ == "__main__":
    uvicorn.run("resume_screener.api:app", host=API_HOST, port=API_PORT)
