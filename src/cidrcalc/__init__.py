"""
cidrcalc - IPv4 CIDR Subnet Arithmetic

Computes subnet masks, host masks, network and broadcast addresses,
address counts, subnet overlap and address membership for IPv4
ranges given in integer or dotted-decimal form.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
