"""Lynk command line interface"""
