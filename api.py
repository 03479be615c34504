"""
API server for the Intelligence Reports engine.
"""
import argparse
import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from intel_reports import __version__
from intel_reports.api.report_endpoints import router as reports_router
from intel_reports.catalog.report_types import get_catalog
from intel_reports.config.settings import get_settings

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Create the FastAPI app
app = FastAPI(title="Intelligence Reports API", description="API for configuring and rendering intelligence reports")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include report router
app.include_router(reports_router)


@app.get("/health")
async def health_check():
    """Simple health check."""
    return {
        "status": "healthy",
        "version": __version__,
        "report_types": len(get_catalog()),
    }


def main():
    """Main entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Parse command line arguments
    parser = argparse.ArgumentParser(description="Intelligence Reports API Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=12000, help="Port to bind to")
    args = parser.parse_args()

    logger.info(f"Starting {settings.app_name} on {args.host}:{args.port}")
    # Start the API server
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
