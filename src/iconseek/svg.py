"""
SVG markup and Iconify CDN URLs for resolved icons.
"""

from iconseek.models.catalog import ResolvedIcon

ICONIFY_API_BASE = "https://api.iconify.design"


def build_svg(icon: ResolvedIcon) -> str:
    """Build a complete SVG document from a resolved icon."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {icon.width} {icon.height}" '
        f'width="{icon.width}" height="{icon.height}">{icon.body}</svg>'
    )


def iconify_svg_url(prefix: str, name: str) -> str:
    """URL of the icon's SVG on the Iconify CDN."""
    return f"{ICONIFY_API_BASE}/{prefix}/{name}.svg"


def iconify_img_url(prefix: str, name: str) -> str:
    """CDN URL sized for ``<img>`` thumbnails in a grid."""
    return f"{iconify_svg_url(prefix, name)}?height=1.2em"
