"""Maze carving, wall emission and difficulty scaling"""
