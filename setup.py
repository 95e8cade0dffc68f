from setuptools import setup

description = "Queue built on an intrusive circular doubly-linked list"


setup(
    name="ringqueue",
    author="Yiling",
    author_email="njjyl723@gmail.com",
    license="BSD-3-Clause",
    version="v0.1.0",
    packages=["ringqueue"],
    description=description,
    python_requires=">=3.7",
    install_requires=[
        "structlog",
        "typing_extensions",
    ],
    zip_safe=False,
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.7",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],
)
