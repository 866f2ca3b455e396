'''
Curve
-----
Functions for computations over plane curves, approximated as series of points (polylines) or parametric splines.
 - curve.cardinal: sample cardinal (Catmull-Rom-style) splines through control points into flat x,y buffers, for open or closed paths.
 - curve.geometry: conversion between point arrays and interleaved x,y buffers.
 - curve.draw: hand sampled splines to a path object (celiagg.Path or similar) as move-to/line-to/close commands.
 '''
