#!/usr/bin/env python3
"""
hardenscan core: ELF metadata view and per-file inspection
"""
