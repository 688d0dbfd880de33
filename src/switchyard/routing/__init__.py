"""Routing — ordered per-method route table with first-match-wins dispatch.

Routes are compiled to anchored patterns when registered and consulted
read-only while dispatching.
"""
