#!/usr/bin/env python3
"""
DNS Provider Capabilities - Main Entry Point

This is the main entry point for the capability registry CLI.
It can be run directly or imported as a module.
"""

from dns_capabilities.cli.main import main

if __name__ == "__main__":
    main()
