from setuptools import setup

setup(
    name = "Rect-Swarm",
    version = "0.01",
    author = "Elliot Hallmark",
    author_email = "permafacture@gmail.com",
    description = ("Procedurally generated, bouncing, bordered rectangles "
                   "kept in a single numpy triangle mesh"),
    license = "GPLv2",
    keywords = "data oriented programming, mesh, animation, pyglet",
    url = "https://github.com/Permafacture/data-oriented-pyglet",
    install_requires = ['numpy','pyglet>=2.0'],
    packages=['rectswarm',],
    python_requires=">=3.8",
    classifiers=["Programming Language :: Python :: 3"]
)
