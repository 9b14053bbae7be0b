"""Lynk backend: channel service and HTTP API"""
