#!/usr/bin/env python3
"""
MAC Lookup - Web API
FastAPI web server for searching switch ports by MAC address
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

# Import our configuration and models
from config import settings, get_database_path, get_skip_ports
from models import SearchResponse
from inventory_search import LookupFailure, search_mac

# Configure logging
handlers = [logging.StreamHandler()]
if settings.log_file:
    Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
    handlers.append(logging.FileHandler(settings.log_file))

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=handlers
)
logger = logging.getLogger(__name__)

# FastAPI app
app = FastAPI(
    title="MAC Lookup",
    description="Find the switch and port a MAC address was learned on",
    version="1.0.0"
)

@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting MAC Lookup Web API (database: {settings.database_path})")
    if not Path(settings.database_path).exists():
        logger.warning(f"Database file {settings.database_path} does not exist yet")

@app.get("/", response_class=HTMLResponse)
async def get_search_page():
    """Serve the search page HTML"""
    html_content = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>MAC Address Search</title>
    <style>
        body { font-family: Arial, sans-serif; background-color: #f4f4f9; padding: 20px; }
        h1 { text-align: center; color: #333; }
        .search-container { display: flex; justify-content: center; margin-bottom: 20px; }
        .search-input { width: 300px; padding: 10px; border: 2px solid #ddd; border-radius: 5px; font-size: 16px; }
        .search-button { padding: 10px 20px; background-color: #007BFF; color: white; border: none; border-radius: 5px; cursor: pointer; margin-left: 10px; }
        .search-button:hover { background-color: #0056b3; }
        .results { margin-top: 20px; display: flex; flex-direction: column; align-items: center; }
        .result-item { background-color: #fff; border: 1px solid #ddd; border-radius: 5px; margin: 5px 0; padding: 10px; font-size: 16px; width: 400px; }
        .no-results { color: #888; }
    </style>
</head>
<body>
    <h1>MAC Address Search</h1>

    <div class="search-container">
        <input type="text" id="macSearchInput" class="search-input" placeholder="Enter MAC address to search...">
        <button class="search-button" onclick="searchMacAddress()">Search</button>
    </div>

    <div class="results" id="results"></div>

    <script>
        function escapeHtml(value) {
            if (value === null || value === undefined) {
                return '';
            }
            return String(value)
                .replace(/&/g, '&amp;')
                .replace(/</g, '&lt;')
                .replace(/>/g, '&gt;')
                .replace(/"/g, '&quot;')
                .replace(/'/g, '&#39;');
        }

        function showMessage(message) {
            document.getElementById('results').innerHTML =
                '<p class="no-results">' + escapeHtml(message) + '</p>';
        }

        async function searchMacAddress() {
            const macAddress = document.getElementById('macSearchInput').value.trim();
            const resultsDiv = document.getElementById('results');

            if (!macAddress) {
                showMessage('Please enter a MAC address.');
                return;
            }

            resultsDiv.innerHTML = 'Loading...';

            try {
                const response = await fetch('/search_mac?mac=' + encodeURIComponent(macAddress));
                const data = await response.json();

                if (data.success && data.result && data.result.length > 0) {
                    resultsDiv.innerHTML = data.result.map(item => `
                        <div class="result-item">
                            <strong>Hostname:</strong> ${escapeHtml(item.switch_name)} <br>
                            <strong>IP:</strong> ${escapeHtml(item.switch_ip)} <br>
                            <strong>Brand:</strong> ${escapeHtml(item.vendor)} <br>
                            <strong>MAC Address:</strong> ${escapeHtml(item.mac_address)} <br>
                            <strong>Port:</strong> ${escapeHtml(item.port_name)} <strong>Type:</strong> ${escapeHtml(item.access_val)} <br>
                            <strong>Created At:</strong> ${escapeHtml(item.created_at)} <br>
                            <strong>Updated At:</strong> ${escapeHtml(item.updated_at)}
                        </div>
                    `).join('');
                } else {
                    showMessage(data.message || 'No data found for this MAC address.');
                }
            } catch (error) {
                console.error('Error:', error);
                showMessage('Error fetching data.');
            }
        }

        document.addEventListener('DOMContentLoaded', function() {
            document.getElementById('macSearchInput').addEventListener('keydown', function(event) {
                if (event.key === 'Enter') {
                    searchMacAddress();
                }
            });
        });
    </script>
</body>
</html>"""
    return html_content

@app.get("/search_mac")
async def search_mac_address(mac: Optional[str] = None):
    """Look up a MAC address; failures are reported in the body, never as HTTP errors"""
    try:
        records = await search_mac(mac, get_database_path(), get_skip_ports())
    except LookupFailure as e:
        return SearchResponse(success=False, message=e.message).payload()

    logger.info(f"MAC lookup for {records[0].mac_address}: {len(records)} result(s)")
    return SearchResponse(success=True, result=records).payload()

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "database": settings.database_path,
        "database_exists": Path(settings.database_path).exists()
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.web_host, port=settings.web_port)
