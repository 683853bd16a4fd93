from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from fieldcard.config import load_settings
from fieldcard.log import setup_logging

from .tools_jobcard import generate_job_card, qc_job_card, render_job_card_notes

mcp = FastMCP("fieldcard")

mcp.tool()(generate_job_card)
mcp.tool()(qc_job_card)
mcp.tool()(render_job_card_notes)

def main():
    # stdout carries the stdio protocol; logging goes to stderr
    setup_logging(load_settings().log_level)
    mcp.run(transport="stdio")

if __name__ == "__main__":
    main()
