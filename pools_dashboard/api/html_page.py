"""
Plain HTML rendering of the dashboard view model.

Cards keep the order the subgraph returned them in. The refresh button is
disabled while a fetch is in flight.
"""

from __future__ import annotations

import html

from pools_dashboard.application.dto.dashboard import DashboardOutput, PoolCardOutput


def _esc(value: str) -> str:
    return html.escape(value, quote=True)


def _render_card(card: PoolCardOutput) -> str:
    return (
        f'<article class="pool-card" data-pool-id="{_esc(card.id)}">'
        f"<h2>{_esc(card.pair_label)}</h2>"
        f'<span class="fee">{_esc(card.fee_percent)} fee</span>'
        f'<p class="pool-id" title="{_esc(card.id)}">{_esc(card.short_id)}</p>'
        "<dl>"
        f"<dt>TVL</dt><dd>{_esc(card.total_value_locked_usd)}</dd>"
        f"<dt>Volume</dt><dd>{_esc(card.volume_usd)}</dd>"
        "</dl>"
        "</article>"
    )


def render_dashboard_html(output: DashboardOutput) -> str:
    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        '<head><meta charset="utf-8"><title>Uniswap V3 top pools</title></head>',
        "<body>",
        "<header><h1>Uniswap V3 top pools by TVL</h1></header>",
        '<section class="status">',
        f'<p class="status-label">{_esc(output.status_label)}</p>',
    ]
    if output.last_updated_label:
        parts.append(f'<p class="last-updated">Last updated: {_esc(output.last_updated_label)}</p>')
    disabled = "" if output.refresh_enabled else " disabled"
    parts.append(
        '<form method="post" action="/refresh">'
        f'<button type="submit"{disabled}>{_esc(output.refresh_label)}</button>'
        "</form>"
    )
    parts.append("</section>")

    if output.error_message:
        parts.append(f'<div class="error" role="alert">{_esc(output.error_message)}</div>')

    parts.append('<main class="pools">')
    parts.extend(_render_card(card) for card in output.cards)
    if output.empty_placeholder:
        parts.append(f'<div class="empty">{_esc(output.empty_placeholder)}</div>')
    parts.append("</main>")

    parts.append("<footer>Data from the Uniswap V3 mainnet subgraph</footer>")
    parts.append("</body></html>")
    return "\n".join(parts)
