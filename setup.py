#!/usr/bin/env python

from setuptools import setup

setup(name='skeleton-ik',
      version='0.0.1',
      description='CCD and FABRIK inverse kinematics for finger and arm joint chains',
      packages=['skeleton_ik'],
      python_requires='>=3.8',
      install_requires=[
          'numpy',
          'pytransform3d',
          'matplotlib',
      ],
      extras_require={
          'test': ['pytest'],
      },
     )
