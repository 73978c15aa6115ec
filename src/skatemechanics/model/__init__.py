"""
The MODEL layer contains pure data structures and vector algebra.
It has NO knowledge of the GUI (Qt) or of the rendering surfaces.
It deals with user inputs, presets and the rotating polar basis.
"""
