import logging
import pyglet

import propstack

logging.basicConfig(level=logging.DEBUG)

window = pyglet.window.Window(500, 500, resizable=True)

layout = propstack.RootLayout(window, propstack.HProportionalStack(
    propstack.Spacer(background=(255, 0, 0)).set_proportion(3),
    propstack.Spacer(background=(0, 255, 0)).frame(width=150),
    propstack.Spacer(background=(0, 0, 255)).set_proportion(2),
).frame(width=300, height=300))

print(layout)

pyglet.app.run()
