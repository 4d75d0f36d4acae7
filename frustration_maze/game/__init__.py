"""Game flow: session, simulation, effects, levels and rendering"""
