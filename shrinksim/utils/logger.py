# -*- coding: utf-8 -*-
"""
Minimal logger for CLI/workflow chatter; the calculator itself never logs.

info -> stdout; warn/error -> stderr, so `shrinksim run > out.txt` keeps
problems visible.
"""
import sys, time

def _emit(msg: str, stream, tag: str = "") -> None:
    print(f"[{time.strftime('%H:%M:%S')}] {tag}{msg}", file=stream)

def info(msg: str):  _emit(msg, sys.stdout)
def warn(msg: str):  _emit(msg, sys.stderr, "WARNING: ")
def error(msg: str): _emit(msg, sys.stderr, "ERROR: ")
