"""Tk front-end for the task tracker.

Views and components import tkinter; the services and utils subpackages
do not, so they can be imported in headless test runs.
"""
