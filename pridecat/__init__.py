#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/__init__.py

__version__ = "v0.2.0"
