"""Connection lifecycle for the WhatsApp integration placeholder.

No message is ever sent: the QR code is a locally generated SVG and
"confirm" simply marks the connection as established.
"""
from __future__ import annotations

import base64
import logging
import secrets

from django.utils import timezone

from .models import WhatsAppConnection

logger = logging.getLogger(__name__)

_QR_CELLS = 21
_QR_CELL_PX = 8


class ConnectionStateError(Exception):
    pass


def get_connection(tenant) -> WhatsAppConnection:
    conn, _created = WhatsAppConnection.objects.get_or_create(tenant=tenant)
    return conn


def placeholder_qr_svg(seed: bytes | None = None) -> str:
    """Random QR-looking SVG as a data URI."""
    seed = seed or secrets.token_bytes(64)
    bits = "".join(f"{b:08b}" for b in seed)
    size = _QR_CELLS * _QR_CELL_PX
    rects = []
    for idx in range(_QR_CELLS * _QR_CELLS):
        if bits[idx % len(bits)] == "1":
            x, y = (idx % _QR_CELLS) * _QR_CELL_PX, (idx // _QR_CELLS) * _QR_CELL_PX
            rects.append(f'<rect x="{x}" y="{y}" width="{_QR_CELL_PX}" height="{_QR_CELL_PX}"/>')
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 {size} {size}">'
        f'<rect width="100%" height="100%" fill="#fff"/><g fill="#000">{"".join(rects)}</g></svg>'
    )
    return "data:image/svg+xml;base64," + base64.b64encode(svg.encode()).decode()


def generate_qr(tenant) -> WhatsAppConnection:
    conn = get_connection(tenant)
    if conn.status == WhatsAppConnection.STATUS_CONNECTED:
        raise ConnectionStateError("already connected")
    conn.status = WhatsAppConnection.STATUS_CONNECTING
    conn.qr_code = placeholder_qr_svg()
    conn.save(update_fields=["status", "qr_code", "updated_at"])
    logger.info("WhatsApp QR generated tenant_id=%s", tenant.id)
    return conn


def confirm_connection(tenant) -> WhatsAppConnection:
    conn = get_connection(tenant)
    if conn.status != WhatsAppConnection.STATUS_CONNECTING:
        raise ConnectionStateError("no pending connection")
    now = timezone.now()
    conn.status = WhatsAppConnection.STATUS_CONNECTED
    conn.connected_at = now
    conn.last_activity = now
    conn.qr_code = ""
    conn.save(update_fields=["status", "connected_at", "last_activity", "qr_code", "updated_at"])
    logger.info("WhatsApp connected tenant_id=%s", tenant.id)
    return conn


def restart(tenant) -> WhatsAppConnection:
    conn = get_connection(tenant)
    conn.status = WhatsAppConnection.STATUS_DISCONNECTED
    conn.qr_code = ""
    conn.connected_at = None
    conn.save(update_fields=["status", "qr_code", "connected_at", "updated_at"])
    logger.info("WhatsApp connection reset tenant_id=%s", tenant.id)
    return conn
