"""
cvmath core — compute functions (sequences in, numbers out, no file I/O).

    reductions  Max/Min/Idx, abs extremes, step selection, sums
    statistics  mean, median, mode, std_dev and their 4-channel variants
    kernels     dot product and FIR derivative / smoothing stencils
    geometry    point distances, bounding rect, nearest point, bucketing
"""
