# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Standard EXIF tag dictionary

Static table of the tags defined by TIFF 6.0 and EXIF 2.2/2.3 for the
IFD0, IFD1, EXIF, GPS and Interoperability directories. Each record holds
the tag's name, title and description, its support level in every
directory it may appear in (one level per data encoding, in the order
chunky, planar, YCC, compressed), and the format, component count and
default value the EXIF specification prescribes.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from exifcodec.types import IFD, PrimitiveFormat, Rational, SupportLevel

_N = SupportLevel.NOT_ALLOWED
_M = SupportLevel.REQUIRED
_O = SupportLevel.OPTIONAL

# Support levels per encoding: chunky, planar, YCC, compressed
ESL_NNNN = (_N, _N, _N, _N)
ESL_OOOO = (_O, _O, _O, _O)
ESL_MMMM = (_M, _M, _M, _M)
ESL_MMMN = (_M, _M, _M, _N)
ESL_OMON = (_O, _M, _O, _N)
ESL_NNMN = (_N, _N, _M, _N)
ESL_NNMM = (_N, _N, _M, _M)
ESL_NNOO = (_N, _N, _O, _O)
ESL_NNNM = (_N, _N, _N, _M)
ESL_NNNO = (_N, _N, _N, _O)

# Typical support of a TIFF tag valid in both image directories
_BOTH_OPTIONAL = {IFD.IMAGE: ESL_OOOO, IFD.THUMBNAIL: ESL_OOOO}
_BOTH_UNCOMPRESSED = {IFD.IMAGE: ESL_MMMN, IFD.THUMBNAIL: ESL_MMMN}
_BOTH_REQUIRED = {IFD.IMAGE: ESL_MMMM, IFD.THUMBNAIL: ESL_MMMM}
_EXIF_OPTIONAL = {IFD.EXIF: ESL_OOOO}
_GPS_OPTIONAL = {IFD.GPS: ESL_OOOO}
_INTEROP_OPTIONAL = {IFD.INTEROPERABILITY: ESL_OOOO}

_TEXT = (PrimitiveFormat.TEXT,)
_BYTE = (PrimitiveFormat.U8,)
_SHORT = (PrimitiveFormat.U16,)
_LONG = (PrimitiveFormat.U32,)
_SHORT_OR_LONG = (PrimitiveFormat.U16, PrimitiveFormat.U32)
_RATIONAL = (PrimitiveFormat.URATIONAL,)
_SRATIONAL = (PrimitiveFormat.IRATIONAL,)
_UNDEFINED = (PrimitiveFormat.UNDEFINED,)


@dataclass(frozen=True)
class TagInfo:
    """One record of the tag dictionary."""
    code: int
    name: str
    title: str
    description: str
    support: Dict[IFD, Tuple[SupportLevel, ...]] = field(default_factory=dict)
    formats: Tuple[PrimitiveFormat, ...] = ()
    count: Optional[int] = None
    default: Any = None

    def recorded_in(self, ifd: IFD) -> bool:
        """Whether the tag may appear in the directory for any encoding."""
        levels = self.support.get(ifd)
        return levels is not None and any(level != _N for level in levels)


EXIF_TAGS: List[TagInfo] = [
    # ============================================================
    # IFD0 / IFD1 (TIFF) tags
    # ============================================================
    TagInfo(0x00FE, "NewSubfileType", "New Subfile Type",
            "A general indication of the kind of data contained in this subfile.",
            _BOTH_OPTIONAL, _LONG, 1),
    TagInfo(0x0100, "ImageWidth", "Image Width",
            "The number of columns of image data, equal to the number of pixels per row.",
            _BOTH_UNCOMPRESSED, _SHORT_OR_LONG, 1),
    TagInfo(0x0101, "ImageLength", "Image Length",
            "The number of rows of image data.",
            _BOTH_UNCOMPRESSED, _SHORT_OR_LONG, 1),
    TagInfo(0x0102, "BitsPerSample", "Bits per Sample",
            "The number of bits per image component.",
            _BOTH_UNCOMPRESSED, _SHORT, 3, [8, 8, 8]),
    TagInfo(0x0103, "Compression", "Compression",
            "The compression scheme used for the image data.",
            {IFD.IMAGE: ESL_MMMN, IFD.THUMBNAIL: ESL_MMMM}, _SHORT, 1, [6]),
    TagInfo(0x0106, "PhotometricInterpretation", "Photometric Interpretation",
            "The pixel composition.",
            _BOTH_UNCOMPRESSED, _SHORT, 1, [2]),
    TagInfo(0x010D, "DocumentName", "Document Name",
            "The name of the document from which this image was scanned.",
            _BOTH_OPTIONAL, _TEXT),
    TagInfo(0x010E, "ImageDescription", "Image Description",
            "A character string giving the title of the image.",
            _BOTH_OPTIONAL, _TEXT),
    TagInfo(0x010F, "Make", "Manufacturer",
            "The manufacturer of the recording equipment.",
            _BOTH_OPTIONAL, _TEXT),
    TagInfo(0x0110, "Model", "Model",
            "The model name or model number of the equipment.",
            _BOTH_OPTIONAL, _TEXT),
    TagInfo(0x0111, "StripOffsets", "Strip Offsets",
            "For each strip, the byte offset of that strip.",
            _BOTH_UNCOMPRESSED, _SHORT_OR_LONG),
    TagInfo(0x0112, "Orientation", "Orientation",
            "The image orientation viewed in terms of rows and columns.",
            _BOTH_OPTIONAL, _SHORT, 1, [1]),
    TagInfo(0x0115, "SamplesPerPixel", "Samples per Pixel",
            "The number of components per pixel.",
            _BOTH_UNCOMPRESSED, _SHORT, 1, [3]),
    TagInfo(0x0116, "RowsPerStrip", "Rows per Strip",
            "The number of rows per strip.",
            _BOTH_UNCOMPRESSED, _SHORT_OR_LONG, 1),
    TagInfo(0x0117, "StripByteCounts", "Strip Byte Count",
            "The total number of bytes in each strip.",
            _BOTH_UNCOMPRESSED, _SHORT_OR_LONG),
    TagInfo(0x011A, "XResolution", "X-Resolution",
            "The number of pixels per ResolutionUnit in the image width direction.",
            _BOTH_REQUIRED, _RATIONAL, 1, [Rational(72, 1)]),
    TagInfo(0x011B, "YResolution", "Y-Resolution",
            "The number of pixels per ResolutionUnit in the image height direction.",
            _BOTH_REQUIRED, _RATIONAL, 1, [Rational(72, 1)]),
    TagInfo(0x011C, "PlanarConfiguration", "Planar Configuration",
            "Indicates whether pixel components are recorded in chunky or planar format.",
            {IFD.IMAGE: ESL_OMON, IFD.THUMBNAIL: ESL_OMON}, _SHORT, 1, [1]),
    TagInfo(0x0128, "ResolutionUnit", "Resolution Unit",
            "The unit for measuring XResolution and YResolution.",
            _BOTH_REQUIRED, _SHORT, 1, [2]),
    TagInfo(0x012D, "TransferFunction", "Transfer Function",
            "A transfer function for the image, described in tabular style.",
            _BOTH_OPTIONAL, _SHORT, 768),
    TagInfo(0x0131, "Software", "Software",
            "The name and version of the software or firmware used to generate the image.",
            _BOTH_OPTIONAL, _TEXT),
    TagInfo(0x0132, "DateTime", "Date and Time",
            "The date and time of image creation.",
            _BOTH_OPTIONAL, _TEXT, 20),
    TagInfo(0x013B, "Artist", "Artist",
            "The name of the camera owner, photographer or image creator.",
            _BOTH_OPTIONAL, _TEXT),
    TagInfo(0x013E, "WhitePoint", "White Point",
            "The chromaticity of the white point of the image.",
            _BOTH_OPTIONAL, _RATIONAL, 2),
    TagInfo(0x013F, "PrimaryChromaticities", "Primary Chromaticities",
            "The chromaticity of the three primary colors of the image.",
            _BOTH_OPTIONAL, _RATIONAL, 6),
    TagInfo(0x0201, "JPEGInterchangeFormat", "JPEG Interchange Format",
            "The offset to the start byte of compressed thumbnail data.",
            {IFD.IMAGE: ESL_NNNN, IFD.THUMBNAIL: ESL_NNNM}, _LONG, 1),
    TagInfo(0x0202, "JPEGInterchangeFormatLength", "JPEG Interchange Format Length",
            "The number of bytes of compressed thumbnail data.",
            {IFD.IMAGE: ESL_NNNN, IFD.THUMBNAIL: ESL_NNNM}, _LONG, 1),
    TagInfo(0x0211, "YCbCrCoefficients", "YCbCr Coefficients",
            "The matrix coefficients for transformation from RGB to YCbCr image data.",
            _BOTH_OPTIONAL, _RATIONAL, 3),
    TagInfo(0x0212, "YCbCrSubSampling", "YCbCr Sub-Sampling",
            "The sampling ratio of chrominance components in relation to the luminance component.",
            {IFD.IMAGE: ESL_NNMN, IFD.THUMBNAIL: ESL_NNMN}, _SHORT, 2, [2, 1]),
    TagInfo(0x0213, "YCbCrPositioning", "YCbCr Positioning",
            "The position of chrominance components in relation to the luminance component.",
            {IFD.IMAGE: ESL_NNMM, IFD.THUMBNAIL: ESL_NNOO}, _SHORT, 1, [1]),
    TagInfo(0x0214, "ReferenceBlackWhite", "Reference Black/White",
            "The reference black point value and reference white point value.",
            _BOTH_OPTIONAL, _RATIONAL, 6),
    TagInfo(0x8298, "Copyright", "Copyright",
            "Copyright information.",
            _BOTH_OPTIONAL, _TEXT),
    TagInfo(0x8769, "ExifIfdPointer", "Exif IFD Pointer",
            "A pointer to the Exif IFD.",
            _BOTH_OPTIONAL, _LONG, 1),
    TagInfo(0x8825, "GPSInfoIfdPointer", "GPS Info IFD Pointer",
            "A pointer to the GPS Info IFD.",
            _BOTH_OPTIONAL, _LONG, 1),

    # ============================================================
    # EXIF IFD tags
    # ============================================================
    TagInfo(0x829A, "ExposureTime", "Exposure Time",
            "Exposure time, given in seconds.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x829D, "FNumber", "F-Number",
            "The F number.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x8822, "ExposureProgram", "Exposure Program",
            "The class of the program used by the camera to set exposure.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0x8824, "SpectralSensitivity", "Spectral Sensitivity",
            "The spectral sensitivity of each channel of the camera used.",
            _EXIF_OPTIONAL, _TEXT),
    TagInfo(0x8827, "ISOSpeedRatings", "ISO Speed Ratings",
            "The ISO Speed and ISO Latitude of the camera or input device.",
            _EXIF_OPTIONAL, _SHORT),
    TagInfo(0x8828, "OECF", "Opto-Electronic Conversion Function",
            "The Opto-Electric Conversion Function specified in ISO 14524.",
            _EXIF_OPTIONAL, _UNDEFINED),
    TagInfo(0x8830, "SensitivityType", "Sensitivity Type",
            "Which of the sensitivity parameters is recorded for ISOSpeedRatings.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0x9000, "ExifVersion", "Exif Version",
            "The version of the EXIF standard supported.",
            {IFD.EXIF: ESL_MMMM}, _UNDEFINED, 4, list(b"0220")),
    TagInfo(0x9003, "DateTimeOriginal", "Date and Time (Original)",
            "The date and time when the original image data was generated.",
            _EXIF_OPTIONAL, _TEXT, 20),
    TagInfo(0x9004, "DateTimeDigitized", "Date and Time (Digitized)",
            "The date and time when the image was stored as digital data.",
            _EXIF_OPTIONAL, _TEXT, 20),
    TagInfo(0x9010, "OffsetTime", "Offset Time",
            "Time difference from Universal Time of DateTime.",
            _EXIF_OPTIONAL, _TEXT, 7),
    TagInfo(0x9011, "OffsetTimeOriginal", "Offset Time (Original)",
            "Time difference from Universal Time of DateTimeOriginal.",
            _EXIF_OPTIONAL, _TEXT, 7),
    TagInfo(0x9012, "OffsetTimeDigitized", "Offset Time (Digitized)",
            "Time difference from Universal Time of DateTimeDigitized.",
            _EXIF_OPTIONAL, _TEXT, 7),
    TagInfo(0x9101, "ComponentsConfiguration", "Components Configuration",
            "Information specific to compressed data: the meaning of each component.",
            {IFD.EXIF: ESL_NNNM}, _UNDEFINED, 4, [1, 2, 3, 0]),
    TagInfo(0x9102, "CompressedBitsPerPixel", "Compressed Bits per Pixel",
            "The compression mode used for a compressed image, in bits per pixel.",
            {IFD.EXIF: ESL_NNNO}, _RATIONAL, 1),
    TagInfo(0x9201, "ShutterSpeedValue", "Shutter Speed",
            "Shutter speed in APEX units.",
            _EXIF_OPTIONAL, _SRATIONAL, 1),
    TagInfo(0x9202, "ApertureValue", "Aperture",
            "The lens aperture in APEX units.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x9203, "BrightnessValue", "Brightness",
            "The value of brightness in APEX units.",
            _EXIF_OPTIONAL, _SRATIONAL, 1),
    TagInfo(0x9204, "ExposureBiasValue", "Exposure Bias",
            "The exposure bias in APEX units.",
            _EXIF_OPTIONAL, _SRATIONAL, 1),
    TagInfo(0x9205, "MaxApertureValue", "Maximum Aperture Value",
            "The smallest F number of the lens in APEX units.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x9206, "SubjectDistance", "Subject Distance",
            "The distance to the subject, given in meters.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x9207, "MeteringMode", "Metering Mode",
            "The metering mode.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0x9208, "LightSource", "Light Source",
            "The kind of light source.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0x9209, "Flash", "Flash",
            "The status of flash when the image was shot.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0x920A, "FocalLength", "Focal Length",
            "The actual focal length of the lens, in mm.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x9214, "SubjectArea", "Subject Area",
            "The location and area of the main subject in the overall scene.",
            _EXIF_OPTIONAL, _SHORT),
    TagInfo(0x927C, "MakerNote", "Maker Note",
            "A tag for manufacturers of EXIF writers to record any desired information.",
            _EXIF_OPTIONAL, _UNDEFINED),
    TagInfo(0x9286, "UserComment", "User Comment",
            "A tag for EXIF users to write keywords or comments on the image.",
            _EXIF_OPTIONAL, _UNDEFINED),
    TagInfo(0x9290, "SubSecTime", "Sub-second Time",
            "Fractions of seconds for the DateTime tag.",
            _EXIF_OPTIONAL, _TEXT),
    TagInfo(0x9291, "SubSecTimeOriginal", "Sub-second Time (Original)",
            "Fractions of seconds for the DateTimeOriginal tag.",
            _EXIF_OPTIONAL, _TEXT),
    TagInfo(0x9292, "SubSecTimeDigitized", "Sub-second Time (Digitized)",
            "Fractions of seconds for the DateTimeDigitized tag.",
            _EXIF_OPTIONAL, _TEXT),
    TagInfo(0xA000, "FlashPixVersion", "FlashPixVersion",
            "The FlashPix format version supported by a FPXR file.",
            {IFD.EXIF: ESL_MMMM}, _UNDEFINED, 4, list(b"0100")),
    TagInfo(0xA001, "ColorSpace", "Color Space",
            "The color space information tag.",
            {IFD.EXIF: ESL_MMMM}, _SHORT, 1, [1]),
    TagInfo(0xA002, "PixelXDimension", "Pixel X Dimension",
            "The valid width of the meaningful image for compressed files.",
            {IFD.EXIF: ESL_NNNM}, _SHORT_OR_LONG, 1),
    TagInfo(0xA003, "PixelYDimension", "Pixel Y Dimension",
            "The valid height of the meaningful image for compressed files.",
            {IFD.EXIF: ESL_NNNM}, _SHORT_OR_LONG, 1),
    TagInfo(0xA004, "RelatedSoundFile", "Related Sound File",
            "The name of an audio file related to the image data.",
            _EXIF_OPTIONAL, _TEXT, 13),
    TagInfo(0xA005, "InteroperabilityIfdPointer", "Interoperability IFD Pointer",
            "A pointer to the Interoperability IFD.",
            _EXIF_OPTIONAL, _LONG, 1),
    TagInfo(0xA20B, "FlashEnergy", "Flash Energy",
            "The strobe energy at the time the image is captured, in BCPS.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0xA20C, "SpatialFrequencyResponse", "Spatial Frequency Response",
            "The camera or input device spatial frequency table and SFR values.",
            _EXIF_OPTIONAL, _UNDEFINED),
    TagInfo(0xA20E, "FocalPlaneXResolution", "Focal Plane X-Resolution",
            "The number of pixels in the image width direction per FocalPlaneResolutionUnit.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0xA20F, "FocalPlaneYResolution", "Focal Plane Y-Resolution",
            "The number of pixels in the image height direction per FocalPlaneResolutionUnit.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0xA210, "FocalPlaneResolutionUnit", "Focal Plane Resolution Unit",
            "The unit for measuring FocalPlaneXResolution and FocalPlaneYResolution.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA214, "SubjectLocation", "Subject Location",
            "The location of the main subject in the scene.",
            _EXIF_OPTIONAL, _SHORT, 2),
    TagInfo(0xA215, "ExposureIndex", "Exposure Index",
            "The exposure index selected on the camera or input device.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0xA217, "SensingMethod", "Sensing Method",
            "The image sensor type on the camera or input device.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA300, "FileSource", "File Source",
            "The image source.",
            _EXIF_OPTIONAL, _UNDEFINED, 1),
    TagInfo(0xA301, "SceneType", "Scene Type",
            "The type of scene.",
            _EXIF_OPTIONAL, _UNDEFINED, 1),
    TagInfo(0xA302, "CFAPattern", "CFA Pattern",
            "The color filter array geometric pattern of the image sensor.",
            _EXIF_OPTIONAL, _UNDEFINED),
    TagInfo(0xA401, "CustomRendered", "Custom Rendered",
            "The use of special processing on image data.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA402, "ExposureMode", "Exposure Mode",
            "The exposure mode set when the image was shot.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA403, "WhiteBalance", "White Balance",
            "The white balance mode set when the image was shot.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA404, "DigitalZoomRatio", "Digital Zoom Ratio",
            "The digital zoom ratio when the image was shot.",
            _EXIF_OPTIONAL, _RATIONAL, 1),
    TagInfo(0xA405, "FocalLengthIn35mmFilm", "Focal Length in 35mm Film",
            "The equivalent focal length assuming a 35mm film camera, in mm.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA406, "SceneCaptureType", "Scene Capture Type",
            "The type of scene that was shot.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA407, "GainControl", "Gain Control",
            "The degree of overall image gain adjustment.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA408, "Contrast", "Contrast",
            "The direction of contrast processing applied by the camera.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA409, "Saturation", "Saturation",
            "The direction of saturation processing applied by the camera.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA40A, "Sharpness", "Sharpness",
            "The direction of sharpness processing applied by the camera.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA40B, "DeviceSettingDescription", "Device Setting Description",
            "Information on the picture-taking conditions of a particular camera model.",
            _EXIF_OPTIONAL, _UNDEFINED),
    TagInfo(0xA40C, "SubjectDistanceRange", "Subject Distance Range",
            "The distance to the subject.",
            _EXIF_OPTIONAL, _SHORT, 1),
    TagInfo(0xA420, "ImageUniqueID", "Image Unique ID",
            "An identifier assigned uniquely to each image.",
            _EXIF_OPTIONAL, _TEXT, 33),
    TagInfo(0xA430, "CameraOwnerName", "Camera Owner Name",
            "The owner of the camera used to capture the image.",
            _EXIF_OPTIONAL, _TEXT),
    TagInfo(0xA431, "BodySerialNumber", "Body Serial Number",
            "The serial number of the body of the camera.",
            _EXIF_OPTIONAL, _TEXT),
    TagInfo(0xA432, "LensSpecification", "Lens Specification",
            "Minimum and maximum focal length and F number of the lens.",
            _EXIF_OPTIONAL, _RATIONAL, 4),
    TagInfo(0xA433, "LensMake", "Lens Make",
            "The lens manufacturer.",
            _EXIF_OPTIONAL, _TEXT),
    TagInfo(0xA434, "LensModel", "Lens Model",
            "The lens model name and model number.",
            _EXIF_OPTIONAL, _TEXT),
    TagInfo(0xA435, "LensSerialNumber", "Lens Serial Number",
            "The serial number of the interchangeable lens.",
            _EXIF_OPTIONAL, _TEXT),

    # ============================================================
    # GPS IFD tags
    # ============================================================
    TagInfo(0x0000, "GPSVersionID", "GPS Tag Version",
            "The version of the GPS IFD.",
            _GPS_OPTIONAL, _BYTE, 4, [2, 2, 0, 0]),
    TagInfo(0x0001, "GPSLatitudeRef", "North or South Latitude",
            "Whether the latitude is north or south latitude.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x0002, "GPSLatitude", "Latitude",
            "The latitude as degrees, minutes and seconds.",
            _GPS_OPTIONAL, _RATIONAL, 3),
    TagInfo(0x0003, "GPSLongitudeRef", "East or West Longitude",
            "Whether the longitude is east or west longitude.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x0004, "GPSLongitude", "Longitude",
            "The longitude as degrees, minutes and seconds.",
            _GPS_OPTIONAL, _RATIONAL, 3),
    TagInfo(0x0005, "GPSAltitudeRef", "Altitude Reference",
            "The altitude used as the reference altitude.",
            _GPS_OPTIONAL, _BYTE, 1),
    TagInfo(0x0006, "GPSAltitude", "Altitude",
            "The altitude based on the reference in GPSAltitudeRef, in meters.",
            _GPS_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x0007, "GPSTimeStamp", "GPS Time (Atomic Clock)",
            "The time as UTC as hour, minute and second.",
            _GPS_OPTIONAL, _RATIONAL, 3),
    TagInfo(0x0008, "GPSSatellites", "GPS Satellites",
            "The GPS satellites used for measurements.",
            _GPS_OPTIONAL, _TEXT),
    TagInfo(0x0009, "GPSStatus", "GPS Receiver Status",
            "The status of the GPS receiver when the image was recorded.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x000A, "GPSMeasureMode", "GPS Measurement Mode",
            "The GPS measurement mode.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x000B, "GPSDOP", "Measurement Precision",
            "The GPS DOP (data degree of precision).",
            _GPS_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x000C, "GPSSpeedRef", "Speed Unit",
            "The unit used to express the GPS receiver speed of movement.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x000D, "GPSSpeed", "Speed of GPS Receiver",
            "The speed of GPS receiver movement.",
            _GPS_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x000E, "GPSTrackRef", "Reference for direction of movement",
            "The reference for giving the direction of GPS receiver movement.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x000F, "GPSTrack", "Direction of Movement",
            "The direction of GPS receiver movement.",
            _GPS_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x0010, "GPSImgDirectionRef", "GPS Image Direction Reference",
            "The reference for giving the direction of the image when it is captured.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x0011, "GPSImgDirection", "GPS Image Direction",
            "The direction of the image when it was captured.",
            _GPS_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x0012, "GPSMapDatum", "Geodetic Survey Data Used",
            "The geodetic survey data used by the GPS receiver.",
            _GPS_OPTIONAL, _TEXT),
    TagInfo(0x0013, "GPSDestLatitudeRef", "Reference For Latitude of Destination",
            "Whether the latitude of the destination point is north or south latitude.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x0014, "GPSDestLatitude", "Latitude of Destination",
            "The latitude of the destination point.",
            _GPS_OPTIONAL, _RATIONAL, 3),
    TagInfo(0x0015, "GPSDestLongitudeRef", "Reference for Longitude of Destination",
            "Whether the longitude of the destination point is east or west longitude.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x0016, "GPSDestLongitude", "Longitude of Destination",
            "The longitude of the destination point.",
            _GPS_OPTIONAL, _RATIONAL, 3),
    TagInfo(0x0017, "GPSDestBearingRef", "Reference for Bearing of Destination",
            "The reference used for giving the bearing to the destination point.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x0018, "GPSDestBearing", "Bearing of Destination",
            "The bearing to the destination point.",
            _GPS_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x0019, "GPSDestDistanceRef", "Reference for Distance to Destination",
            "The unit used to express the distance to the destination point.",
            _GPS_OPTIONAL, _TEXT, 2),
    TagInfo(0x001A, "GPSDestDistance", "Distance to Destination",
            "The distance to the destination point.",
            _GPS_OPTIONAL, _RATIONAL, 1),
    TagInfo(0x001B, "GPSProcessingMethod", "Name of GPS Processing Method",
            "The name of the method used for location finding.",
            _GPS_OPTIONAL, _UNDEFINED),
    TagInfo(0x001C, "GPSAreaInformation", "Name of GPS Area",
            "The name of the GPS area.",
            _GPS_OPTIONAL, _UNDEFINED),
    TagInfo(0x001D, "GPSDateStamp", "GPS Date",
            "Date and time information relative to UTC.",
            _GPS_OPTIONAL, _TEXT, 11),
    TagInfo(0x001E, "GPSDifferential", "GPS Differential Correction",
            "Whether differential correction is applied to the GPS receiver.",
            _GPS_OPTIONAL, _SHORT, 1),

    # ============================================================
    # Interoperability IFD tags
    # ============================================================
    TagInfo(0x0001, "InteroperabilityIndex", "Interoperability Index",
            "The identification of the Interoperability rule.",
            {IFD.INTEROPERABILITY: ESL_MMMM}, _TEXT, 4, "R98"),
    TagInfo(0x0002, "InteroperabilityVersion", "Interoperability Version",
            "The version of the Interoperability rule.",
            _INTEROP_OPTIONAL, _UNDEFINED, 4),
    TagInfo(0x1000, "RelatedImageFileFormat", "Related Image File Format",
            "The file format of the image file.",
            _INTEROP_OPTIONAL, _TEXT),
    TagInfo(0x1001, "RelatedImageWidth", "Related Image Width",
            "The image width of the image file.",
            _INTEROP_OPTIONAL, _SHORT_OR_LONG, 1),
    TagInfo(0x1002, "RelatedImageLength", "Related Image Length",
            "The image height of the image file.",
            _INTEROP_OPTIONAL, _SHORT_OR_LONG, 1),
]


def _build_index() -> Dict[Tuple[int, IFD], TagInfo]:
    index = {}
    for info in EXIF_TAGS:
        for ifd in info.support:
            index[(info.code, ifd)] = info
    return index


# (code, directory) -> record
EXIF_TAG_INDEX: Dict[Tuple[int, IFD], TagInfo] = _build_index()

# Pointer tags are consumed while loading and never kept as entries
POINTER_TAGS = {
    0x8769: IFD.EXIF,
    0x8825: IFD.GPS,
    0xA005: IFD.INTEROPERABILITY,
}

TAG_MAKER_NOTE = 0x927C
TAG_JPEG_INTERCHANGE_FORMAT = 0x0201
TAG_JPEG_INTERCHANGE_FORMAT_LENGTH = 0x0202
TAG_COMPRESSION = 0x0103
TAG_PHOTOMETRIC_INTERPRETATION = 0x0106
TAG_PLANAR_CONFIGURATION = 0x011C


def get_tag_info(code: int, ifd: IFD) -> Optional[TagInfo]:
    """
    Look a tag up in a directory.

    With IFD.UNKNOWN the first directory that knows the tag wins, in
    directory order.
    """
    if ifd is IFD.UNKNOWN:
        for candidate in (IFD.IMAGE, IFD.THUMBNAIL, IFD.EXIF, IFD.GPS, IFD.INTEROPERABILITY):
            info = EXIF_TAG_INDEX.get((code, candidate))
            if info is not None and info.recorded_in(candidate):
                return info
        return None
    return EXIF_TAG_INDEX.get((code, ifd))
