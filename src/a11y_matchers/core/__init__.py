"""Core domain package for a11y-matchers.

Core contains scope building, script composition, and result reporting
without any browser-driver-specific code, keeping the audit logic portable.
"""
