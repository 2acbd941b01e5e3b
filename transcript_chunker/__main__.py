"""Package entry point for ``python -m transcript_chunker``.

WHY: Users run the chunker as ``python -m transcript_chunker transcript.json``
for CLI mode, or ``python -m transcript_chunker --serve`` for the HTTP API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
FastAPI app under uvicorn. Otherwise, delegates to the CLI's main().
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from transcript_chunker.server.app import run_api
        run_api()
    else:
        from transcript_chunker.cli import main
        main()
