"""Command line entry point: print pod summaries for a namespace."""

import argparse
import asyncio
import json
import sys

import structlog

from podstatus.config import Settings, get_settings
from podstatus.errors import PodStatusError
from podstatus.events import fetch_events
from podstatus.k8s.client import ConnectionMode, KubernetesClient
from podstatus.summary import PodSummary, summarize_pods
from podstatus.utils import configure_logging

logger = structlog.get_logger()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="podstatus", description="Summarize pod status in a Kubernetes namespace")
    parser.add_argument("namespace", nargs="?", default=settings.namespace,
                        help=f"Namespace to query (default: {settings.namespace})")
    parser.add_argument("--mode", choices=[m.value for m in ConnectionMode],
                        default=settings.connection_mode.value, help="How to authenticate against the cluster")
    parser.add_argument("--kubeconfig", default=settings.kubeconfig_path, help="Path to the kubeconfig file")
    parser.add_argument("--context", default=settings.kube_context, help="Kubeconfig context")
    parser.add_argument("--output", "-o", choices=["table", "json"], default="table", help="Output format")
    parser.add_argument("--events", action="store_true", help="List events instead of pods")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level,
                        help="Log level written to stderr")
    return parser


def format_age(seconds: float) -> str:
    """Render an uptime the way kubectl's AGE column does (5s, 3m, 2h, 4d)."""
    seconds = max(int(seconds), 0)
    for unit, size in (("d", 86400), ("h", 3600), ("m", 60)):
        if seconds >= size:
            return f"{seconds // size}{unit}"
    return f"{seconds}s"


def render_table(summaries: list[PodSummary]) -> str:
    rows = [("NAME", "STATUS", "RESTARTS", "AGE")]
    rows += [(s.name, s.status, str(s.restart_count), format_age(s.uptime_seconds)) for s in summaries]
    widths = [max(len(row[i]) for row in rows) for i in range(4)]
    return "\n".join("   ".join(col.ljust(w) for col, w in zip(row, widths)).rstrip() for row in rows)


async def run(args: argparse.Namespace, request_timeout: float) -> str:
    client = await KubernetesClient.connect(
        ConnectionMode(args.mode),
        kubeconfig=args.kubeconfig,
        context=args.context,
        request_timeout=request_timeout,
    )
    async with client:
        if args.events:
            events = await fetch_events(client, args.namespace)
            if args.output == "json":
                return json.dumps([e.to_dict() for e in events], indent=2)
            return "\n".join(f"{e.type}\t{e.reason}\t{e.involved_object}\t{e.message}" for e in events)

        summaries = await summarize_pods(client, args.namespace)
        if args.output == "json":
            return json.dumps([s.to_dict() for s in summaries], indent=2)
        return render_table(summaries)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    configure_logging(args.log_level, json_logs=settings.environment == "production")

    try:
        output = asyncio.run(run(args, settings.request_timeout_seconds))
    except (PodStatusError, ValueError) as e:
        # ValueError: the cluster returned a record we cannot summarize, e.g. a pod with no start time
        logger.error("podstatus_failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0
