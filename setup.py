from setuptools import find_namespace_packages, setup

package_name = "gridmaze"


def read_requirements():
    with open("requirements.txt", "r") as file:
        return [
            line.strip() for line in file if line.strip() and not line.startswith("#")
        ]


setup(
    name=package_name,
    version="0.0.1",
    packages=find_namespace_packages(
        include=[package_name, package_name + ".*"]
    ),  # Packages have no __init__.py files
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    zip_safe=True,
    description="Perfect maze generation with randomized Prim's algorithm and A* solving",
    license="MIT",
    tests_require=["pytest"],
    entry_points={
        "console_scripts": ["gridmaze=gridmaze.main:app"],
    },
)
