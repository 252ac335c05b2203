#!/usr/bin/env python
"""
Answer Grader - Application Entry Point

Usage:
    python run.py [--host HOST] [--port PORT] [--reload]
                  [--questions PATH] [--log-level LEVEL]

Examples:
    python run.py                                # Start with .env / defaults
    python run.py --reload --log-level debug     # Development mode
    python run.py --questions data/exam.json     # Grade against another bank
"""
import argparse
import os

import uvicorn

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Answer Grader API Server")
    parser.add_argument("--host", help="Host to bind (default: HOST setting)")
    parser.add_argument("--port", type=int, help="Port to bind (default: PORT setting)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument(
        "--questions",
        help="Question bank JSON file (overrides QUESTIONS_FILE)"
    )
    parser.add_argument("--log-level", default="info", choices=LOG_LEVELS)
    return parser


def main():
    args = build_parser().parse_args()
    
    # Settings are read from the environment, which reload workers inherit
    if args.questions:
        os.environ["QUESTIONS_FILE"] = os.path.abspath(args.questions)
    
    from answer_grader.config import settings
    
    host = args.host or settings.HOST
    port = args.port or settings.PORT
    print(f"Answer Grader API on http://{host}:{port} "
          f"(docs: /docs, questions: {settings.QUESTIONS_FILE})")
    
    uvicorn.run(
        "answer_grader.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=args.log_level
    )


if __name__ == "__main__":
    main()
