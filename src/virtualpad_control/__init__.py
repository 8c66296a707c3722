"""
virtualpad_control

This package provides an asynchronous control-plane client for the
VirtualPad server: it drives the server's command-line admin tool to
start, stop and probe the server, inspect the eight pad slots, clear
pad bindings and rotate pad passwords.
"""
__version__ = "0.1.0"
