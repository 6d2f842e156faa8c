#!/usr/bin/env python3
"""Thin entrypoint for the visual console terminal viewer."""

from __future__ import annotations

from vc_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
