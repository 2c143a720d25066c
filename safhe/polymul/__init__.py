"""Polynomial multiplication algorithms: schoolbook, Karatsuba, Toom-Cook, FFT and NTT."""