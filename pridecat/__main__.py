#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/__main__.py

from pridecat.main import main

if __name__ == "__main__":
    main()
