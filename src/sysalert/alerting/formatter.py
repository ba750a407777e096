"""
Alert message formatting for Telegram MarkdownV2.

Every piece of host-provided text (hostname, mount paths, error messages) is
escaped before it is placed in the message, so raw metric text cannot break
the markup and make Telegram reject the whole alert.
"""

import re
from typing import Optional, Sequence

from ..models.results import Finding

# Characters with special meaning outside code entities.
_MARKDOWN_SPECIAL = re.compile(r"([_*\[\]()~`>#+\-=|{}.!\\])")
# Inside `code` and ```pre``` entities only these need escaping.
_CODE_SPECIAL = re.compile(r"([`\\])")


def escape_markdown(text: str) -> str:
    """Escape text placed outside code entities."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def escape_code(text: str) -> str:
    """Escape text placed inside a code or pre entity."""
    return _CODE_SPECIAL.sub(r"\\\1", text)


def inline_code(text: str) -> str:
    return f"`{escape_code(text)}`"


def format_finding(finding: Finding) -> str:
    """One alert line per Finding; embedded line breaks are collapsed to spaces."""
    return inline_code(" ".join(finding.render().split()))


def format_alert(hostname: str, address: str, findings: Sequence[Finding]) -> Optional[str]:
    """
    Render Findings as one alert message.

    Args:
        hostname: Name of the checked host
        address: Primary address of the host
        findings: Findings in check order

    Returns:
        The message, or None when there is nothing to report.
    """
    if not findings:
        return None
    header = f"❗ {inline_code(hostname)} {escape_markdown('-')} {inline_code(address)}"
    lines = [format_finding(finding) for finding in findings]
    return "\n".join([header, *lines])


def format_update_notice(hostname: str, address: str, version: str, context: str) -> str:
    """
    Render the notice sent after a successful self-update.

    ``context`` is shown in a pre block below the headline (the relevant
    crontab lines, or the error that prevented reading them).
    """
    headline = inline_code(f"{hostname} ({address}) updated to v{version}")
    return f"✅ {headline}\n```\n{escape_code(context)}\n```"
