from setuptools import setup

package_name = "solar_system"

setup(
    name=package_name,
    version="0.0.0",
    packages=[package_name],
    package_data={
        package_name: ["style/*"],
    },
    install_requires=["setuptools", "PyQt5"],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=True,
    keywords=["linked list", "sorting", "PyQt5"],
    classifiers=[
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development",
    ],
    description="A solar system of planets kept in a doubly-linked list, with a GUI to sort and draw it.",
    license="BSD",
    entry_points={
        "console_scripts": [
            "solar_system = solar_system.solar_system:main",
        ]
    }
)
