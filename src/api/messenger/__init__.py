"""Messenger bounded context.

Users, conversations and messages, together with the ownership and
membership rules that decide who may change a conversation and who may
post to it.
"""
