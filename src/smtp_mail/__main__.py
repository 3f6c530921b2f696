"""``python -m smtp_mail``: same behaviour as the ``smtp-mail`` script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
