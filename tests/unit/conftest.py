"""Unit test helpers.

Most configuration helpers are in tests/conftest.py.
"""

from inlineref.api.referable.UriReferable import URI_REFERABLE_TYPE


def marked_link(
    href: str,
    text: str,
    ref_id: int | None = None,
    referable_id: int | None = None,
    referable_type: str = URI_REFERABLE_TYPE,
    **attrs: str,
) -> str:
    """Build an editor anchor carrying skyline-* markers."""
    parts = [f'href="{href}"']
    parts.extend(f'{name}="{value}"' for name, value in attrs.items())
    if ref_id is not None:
        parts.append(f'skyline-ref-id="{ref_id}"')
    if referable_id is not None:
        parts.append(f'skyline-referable-id="{referable_id}"')
    parts.append(f'skyline-referable-type="{referable_type}"')
    return f"<a {' '.join(parts)}>{text}</a>"
