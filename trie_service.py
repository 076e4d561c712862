"""
Trie Lookup Service: a REST API for prefix-based autocomplete.

Exposes the prefix trie as a JSON API with endpoints for inserting words,
exact lookup, prefix checks, and autocompletion. Built with Flask.
Configured entirely through environment variables.
"""

from __future__ import annotations

import logging
import os
import threading
import time

from flask import Flask, jsonify, request

from prefix_trie import SPLITTERS, Trie

logger = logging.getLogger("trie-service")

# Seed with sample data so the service is useful out-of-the-box
_SEED_WORDS = [
    "algorithm", "api", "application", "array", "authentication",
    "binary", "branch", "buffer", "build", "byte",
    "cache", "callback", "class", "client", "compiler",
    "container", "cpu", "database", "debug", "deploy",
    "docker", "endpoint", "exception", "flask", "function",
    "gateway", "git", "graph", "hash", "heap",
    "index", "interface", "json", "kernel", "lambda",
    "linked-list", "load-balancer", "memory", "microservice", "middleware",
    "node", "object", "parser", "pipeline", "pointer",
    "prefix-tree", "process", "queue", "recursion", "redis",
    "request", "response", "rest", "router", "runtime",
    "schema", "server", "socket", "stack", "stream",
    "thread", "token", "tree", "trie", "tuple",
    "upstream", "variable", "version", "webhook", "worker",
]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def load_config(environ=None) -> dict:
    """Read service settings from the environment."""
    env = os.environ if environ is None else environ
    return {
        "seed": env.get("TRIE_SEED", "1") != "0",
        "unit": env.get("TRIE_UNIT", "codepoint"),
        "max_word_length": int(env.get("TRIE_MAX_WORD_LENGTH", 256)),
        "default_limit": int(env.get("TRIE_DEFAULT_LIMIT", 25)),
    }


def _limit_arg(default: int) -> int:
    return max(request.args.get("limit", default, type=int), 0)


# ---------------------------------------------------------------------------
# Flask application
# ---------------------------------------------------------------------------


def create_app(trie: Trie | None = None, seed: bool | None = None, config: dict | None = None) -> Flask:
    """Build the Flask app around *trie* (a fresh one when omitted)."""
    # An explicit config is layered over the defaults, not the environment.
    cfg = load_config({} if config else None)
    if config:
        cfg.update(config)
    if seed is not None:
        cfg["seed"] = seed
    if cfg["unit"] not in SPLITTERS:
        raise ValueError(f"Unknown TRIE_UNIT {cfg['unit']!r}; expected one of {sorted(SPLITTERS)}")

    if trie is None:
        trie = Trie(split=SPLITTERS[cfg["unit"]])
    lock = threading.RLock()
    start_time = time.time()

    if cfg["seed"]:
        with lock:
            for word in _SEED_WORDS:
                trie.insert(word)
        logger.info("Seeded trie with %d words", len(_SEED_WORDS))

    app = Flask(__name__)
    app.config["TRIE"] = trie
    app.config["TRIE_SETTINGS"] = cfg

    # ── Health & Info ─────────────────────────────────────────────────────

    @app.route("/")
    def index():
        """Landing page with API documentation."""
        return jsonify({
            "service": "Trie Lookup Service",
            "version": "1.0.0",
            "description": "REST API for prefix-based autocomplete powered by a prefix trie",
            "endpoints": {
                "GET  /":                        "This help page",
                "GET  /health":                  "Health check",
                "GET  /stats":                   "Trie statistics",
                "GET  /search?q=<word>":         "Exact word lookup",
                "GET  /contains?q=<prefix>":     "Does any word start with prefix",
                "GET  /autocomplete?q=<prefix>": "All words starting with prefix",
                "POST /insert":                  "Insert a word  {\"word\": \"...\"}",
            },
        })

    @app.route("/health")
    def health():
        """Liveness / readiness probe."""
        with lock:
            size = len(trie)
        return jsonify({
            "status": "healthy",
            "uptime_seconds": round(time.time() - start_time, 2),
            "trie_size": size,
        })

    @app.route("/stats")
    def stats():
        """Trie statistics."""
        with lock:
            words, nodes = len(trie), trie.node_count
        return jsonify({
            "total_words": words,
            "total_nodes": nodes,
            "uptime_seconds": round(time.time() - start_time, 2),
            "unit": cfg["unit"],
        })

    # ── Core API ──────────────────────────────────────────────────────────

    @app.route("/search")
    def search():
        """Exact word lookup."""
        if "q" not in request.args:
            return jsonify({"error": "Missing query parameter 'q'"}), 400
        q = request.args["q"]
        with lock:
            found = trie.search(q)
        return jsonify({"word": q, "found": found})

    @app.route("/contains")
    def contains():
        """Prefix existence check."""
        if "q" not in request.args:
            return jsonify({"error": "Missing query parameter 'q'"}), 400
        q = request.args["q"]
        with lock:
            found = trie.contains(q)
        return jsonify({"prefix": q, "found": found})

    @app.route("/autocomplete")
    def autocomplete():
        """Return words sharing a given prefix, sorted and truncated."""
        q = request.args.get("q", "")
        limit = _limit_arg(cfg["default_limit"])
        with lock:
            matches = sorted(trie.autocomplete(q))[:limit]
        return jsonify({
            "prefix": q,
            "count": len(matches),
            "matches": matches,
        })

    @app.route("/insert", methods=["POST"])
    def insert():
        """Insert a word into the trie."""
        body = request.get_json(silent=True)
        word = body.get("word") if isinstance(body, dict) else None

        if not isinstance(word, str):
            return jsonify({"error": "Missing 'word' in request body"}), 400
        if len(word) > cfg["max_word_length"]:
            return jsonify({"error": f"Word too long (max {cfg['max_word_length']} chars)"}), 400

        with lock:
            trie.insert(word)
            size = len(trie)
        logger.info("Inserted word=%r", word)
        return jsonify({"inserted": word, "trie_size": size}), 201

    return app


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------

def main() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    port = int(os.environ.get("PORT", 8080))
    debug = os.environ.get("FLASK_DEBUG", "0") == "1"
    app = create_app()
    logger.info("Starting Trie Lookup Service on port %d", port)
    app.run(host="0.0.0.0", port=port, debug=debug)


if __name__ == "__main__":
    main()
