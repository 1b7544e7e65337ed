"""Falling-block puzzle game."""