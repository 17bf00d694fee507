"""cvd: pick CUDA visible devices from live nvidia-smi output.

Typical use:

    CUDA_VISIBLE_DEVICES=$(cvd --empty-only -n 2) python train.py
"""

__version__ = "0.2.0"
