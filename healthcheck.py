#!/usr/bin/env python3
"""Simple health check script for Docker."""

import os
import sys
import urllib.request
import urllib.error

port = os.environ.get("PORT") or "3000"

try:
    response = urllib.request.urlopen(f'http://localhost:{port}/health', timeout=5)
    if response.getcode() == 200:
        print("Health check passed")
        sys.exit(0)
    else:
        print(f"Health check failed with status: {response.getcode()}")
        sys.exit(1)
except Exception as e:
    print(f"Health check failed: {e}")
    sys.exit(1)
